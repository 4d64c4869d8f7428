# -*- coding: utf-8 -*-
"""Shared pytest fixtures for unit and integration tests."""

from __future__ import annotations

import json
from collections.abc import Callable
from types import SimpleNamespace
from typing import Any
from unittest.mock import AsyncMock

import pytest

from poly_trader.config import HudSettings, PolymarketClobSettings, Settings
from poly_trader.security import compute_signature


@pytest.fixture
def secret() -> str:
    """Shared HUD secret used by tests."""
    return "hud-test-secret"


@pytest.fixture
def settings(secret: str) -> Settings:
    """Settings isolated from the environment and any .env file."""
    return Settings(
        _env_file=None,  # type: ignore[call-arg]
        hud=HudSettings(shared_secret=secret),
        polymarket=PolymarketClobSettings(private_key="0x" + "11" * 32),
    )


@pytest.fixture
def token_yes() -> str:
    return "71321045679252212594626385532706912750332728571942532289631379312455583992563"


@pytest.fixture
def token_no() -> str:
    return "52114319501245915516055106046884209969926127482827954674443846427813813222426"


@pytest.fixture
def market_factory(token_yes: str, token_no: str) -> Callable[..., dict[str, Any]]:
    """Build a Gamma market record with Yes/No outcomes and easy overrides."""

    def _build(**overrides: Any) -> dict[str, Any]:
        market: dict[str, Any] = {
            "conditionId": "0x" + "ab" * 32,
            "slug": "will-it-rain-tomorrow",
            "outcomes": ["Yes", "No"],
            "tokens": [{"token_id": token_yes}, {"token_id": token_no}],
            "best_ask": [0.48, 0.53],
        }
        market.update(overrides)
        return market

    return _build


@pytest.fixture
def sign(secret: str) -> Callable[[bytes], str]:
    """Return the X-HUD-Signature header value for a body."""

    def _sign(body: bytes) -> str:
        return "sha256=" + compute_signature(secret, body)

    return _sign


@pytest.fixture
def trade_body() -> Callable[..., bytes]:
    """Encode a /trade payload with sensible defaults."""

    def _build(**overrides: Any) -> bytes:
        payload: dict[str, Any] = {
            "conditionId": "0x" + "ab" * 32,
            "side": "YES",
            "ask": 0.5,
            "amountUsd": 100,
            "slippage": 0.02,
        }
        payload.update(overrides)
        return json.dumps(payload).encode()

    return _build


@pytest.fixture
def fake_clob() -> SimpleNamespace:
    """AsyncClobClient double that acknowledges every order."""
    return SimpleNamespace(
        ensure_api_creds=AsyncMock(),
        create_order=AsyncMock(return_value="signed-order"),
        post_order=AsyncMock(
            return_value={
                "success": True,
                "errorMsg": "",
                "orderID": "0xorder1",
                "status": "matched",
            }
        ),
    )
