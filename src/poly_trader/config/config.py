# -*- coding: utf-8 -*-
"""Configuration loaded from environment via Pydantic Settings.

Nested env vars use <section>__<key>, e.g. HUD__SHARED_SECRET, POLYMARKET__PRIVATE_KEY.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """General application configuration."""

    model_config = SettingsConfigDict(extra="ignore")

    app_name: str = "poly-trader"
    service_name: Optional[str] = None
    service_version: Optional[str] = None
    environment: Literal["development", "test", "production"] = "development"


class ServerSettings(BaseSettings):
    """HTTP listener for the webhook (aiohttp.web)."""

    model_config = SettingsConfigDict(extra="ignore")

    host: str = Field(default="0.0.0.0", description="Interface to bind.")
    port: int = Field(default=8080, ge=1, le=65535, description="TCP port to bind.")


class LoggingSettings(BaseSettings):
    """Structured logging configuration for structlog/stdlib/Logfire."""

    model_config = SettingsConfigDict(extra="ignore")

    # Per-target levels (only the 5 standard levels)
    console_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    file_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    logfire_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    log_to_console: bool = True
    log_to_file: bool = False
    log_file_path: str = "logs/poly_trader.log"
    # TimedRotatingFileHandler: when to rotate (S/M/H/D/W0–W6/midnight), interval, backups to keep
    log_file_when: Literal[
        "S", "M", "H", "D", "W0", "W1", "W2", "W3", "W4", "W5", "W6", "midnight"
    ] = "midnight"
    log_file_interval: int = 1
    log_file_backup_count: int = 30
    log_file_utc: bool = True

    # Main output format: JSONRenderer if True, ConsoleRenderer if False
    json_format: bool = False

    logfire_enabled: bool = False
    logfire_token: Optional[str] = None


class ApiSettings(BaseSettings):
    """Configuration for the Polymarket Gamma API (HTTP)."""

    model_config = SettingsConfigDict(extra="ignore")

    gamma_host: str = Field(
        default="https://gamma-api.polymarket.com",
        description="Polymarket Gamma API base URL.",
    )
    timeout_seconds: float = Field(
        default=15.0,
        ge=1.0,
        le=120.0,
        description="HTTP request timeout in seconds.",
    )
    gamma_markets_limit: int = Field(
        default=50,
        ge=1,
        le=500,
        description="limit query parameter for /markets lookups.",
    )
    gamma_cache_ttl_seconds: float = Field(
        default=3.0,
        ge=0.0,
        le=300.0,
        description="How long a /markets lookup may be served from cache. 0 disables caching.",
    )
    gamma_cache_maxsize: int = Field(
        default=512,
        ge=1,
        le=100_000,
        description="Maximum cached /markets lookups.",
    )


class HudSettings(BaseSettings):
    """Shared secret and header used to authenticate HUD webhook calls (env HUD__*)."""

    model_config = SettingsConfigDict(extra="ignore")

    shared_secret: Optional[str] = Field(
        default=None,
        description="HMAC-SHA256 key shared with the HUD. Unset rejects every trade.",
    )
    signature_header: str = Field(
        default="X-HUD-Signature",
        description="Request header carrying sha256=<hex digest>.",
    )


class PolymarketClobSettings(BaseSettings):
    """Polymarket CLOB signer and endpoint (from env POLYMARKET__*)."""

    model_config = SettingsConfigDict(extra="ignore")

    clob_host: str = Field(
        default="https://clob.polymarket.com",
        description="Polymarket CLOB API base URL.",
    )
    chain_id: int = Field(default=137, description="Chain ID (e.g. 137 for Polygon).")
    signature_type: Optional[int] = Field(default=None, description="Signature type for CLOB.")
    private_key: Optional[str] = Field(default=None, description="Wallet private key.")
    funder: Optional[str] = Field(
        default=None,
        description="Proxy wallet address (Wallet Address in Polymarket UI).",
    )


class OrderExecutionSettings(BaseSettings):
    """Order construction defaults."""

    model_config = SettingsConfigDict(extra="ignore")

    default_slippage: float = Field(
        default=0.01,
        description="Slippage applied to the ask when the request omits it.",
    )
    client_order_prefix: str = Field(
        default="hud",
        description="Prefix of generated client order ids (<prefix>-<epoch ms>).",
    )


class Settings(BaseSettings):
    """Root application configuration.

    Groups all sub-configurations so the rest of the code does not
    read environment variables directly. Nested overrides use
    <section>__<key>, e.g. LOGGING__CONSOLE_LEVEL, API__GAMMA_HOST.
    """

    model_config = SettingsConfigDict(
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    app: AppSettings = Field(default_factory=AppSettings)
    server: ServerSettings = Field(default_factory=ServerSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    api: ApiSettings = Field(default_factory=ApiSettings)
    hud: HudSettings = Field(default_factory=HudSettings)
    polymarket: PolymarketClobSettings = Field(default_factory=PolymarketClobSettings)
    order_execution: OrderExecutionSettings = Field(default_factory=OrderExecutionSettings)


@lru_cache
def get_settings() -> Settings:
    """Return a single cached instance of Settings.

    Typical usage:

        from poly_trader.config import get_settings

        settings = get_settings()
        secret = settings.hud.shared_secret
    """
    return Settings()
