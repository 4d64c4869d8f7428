"""Configuration subpackage."""

from poly_trader.config.config import (
    ApiSettings,
    AppSettings,
    HudSettings,
    LoggingSettings,
    OrderExecutionSettings,
    PolymarketClobSettings,
    ServerSettings,
    Settings,
    get_settings,
)

__all__ = [
    "ApiSettings",
    "AppSettings",
    "HudSettings",
    "LoggingSettings",
    "OrderExecutionSettings",
    "PolymarketClobSettings",
    "ServerSettings",
    "Settings",
    "get_settings",
]
