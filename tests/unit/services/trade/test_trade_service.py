# -*- coding: utf-8 -*-
"""Unit tests for TradeService orchestration."""

from __future__ import annotations

import json
from collections.abc import Callable
from types import SimpleNamespace
from typing import Any
from unittest.mock import AsyncMock

import pytest
from py_clob_client.order_builder.constants import BUY  # type: ignore[import-untyped]

from poly_trader.config import Settings
from poly_trader.exceptions import AuthError, ResolutionError, SubmissionError, ValidationError
from poly_trader.services.market_resolver import MarketResolver
from poly_trader.services.order_execution import OrderSubmissionService
from poly_trader.services.trade import TradeService


def _service(
    settings: Settings,
    markets: SimpleNamespace,
    clob: SimpleNamespace,
) -> TradeService:
    return TradeService(
        settings,
        MarketResolver(markets),  # type: ignore[arg-type]
        OrderSubmissionService(clob),  # type: ignore[arg-type]
        now_ms=lambda: 1760875200000,
    )


def _markets(response: Any) -> SimpleNamespace:
    return SimpleNamespace(get_markets=AsyncMock(return_value=response))


async def test_execute_places_order_and_reports_fills(
    settings: Settings,
    market_factory: Callable[..., dict[str, Any]],
    fake_clob: SimpleNamespace,
    trade_body: Callable[..., bytes],
    sign: Callable[[bytes], str],
    token_yes: str,
) -> None:
    service = _service(settings, _markets([market_factory()]), fake_clob)
    body = trade_body()

    execution = await service.execute(body, sign(body))

    assert execution.order.price == pytest.approx(0.51)
    assert execution.order.size == pytest.approx(196.08, abs=0.01)
    assert execution.order.client_order_id == "hud-1760875200000"
    wire = execution.to_wire()
    assert wire["ok"] is True
    assert wire["order"]["orderID"] == "0xorder1"
    assert wire["fills"]["avgPrice"] == pytest.approx(0.51)
    assert wire["fills"]["costUsd"] == pytest.approx(100.0)
    assert wire["meta"] == {
        "tokenId": token_yes,
        "clientOrderId": "hud-1760875200000",
        "priceFromBook": 0.48,
    }


async def test_execute_omits_price_from_book_when_absent(
    settings: Settings,
    market_factory: Callable[..., dict[str, Any]],
    fake_clob: SimpleNamespace,
    trade_body: Callable[..., bytes],
    sign: Callable[[bytes], str],
) -> None:
    service = _service(settings, _markets([market_factory(best_ask=None)]), fake_clob)
    body = trade_body()

    execution = await service.execute(body, sign(body))

    assert "priceFromBook" not in execution.to_wire()["meta"]


async def test_book_price_never_overrides_callers_ask(
    settings: Settings,
    market_factory: Callable[..., dict[str, Any]],
    fake_clob: SimpleNamespace,
    trade_body: Callable[..., bytes],
    sign: Callable[[bytes], str],
) -> None:
    service = _service(settings, _markets([market_factory(best_ask=[0.9, 0.1])]), fake_clob)
    body = trade_body(ask=0.2, slippage=0.0, amountUsd=10)

    execution = await service.execute(body, sign(body))

    # slippage 0 is falsy and falls back to the 0.01 default
    assert execution.order.price == pytest.approx(0.202)


@pytest.mark.parametrize("header", [None, "", "deadbeef", "sha1=abc"])
async def test_missing_signature_is_rejected_before_any_io(
    settings: Settings,
    fake_clob: SimpleNamespace,
    trade_body: Callable[..., bytes],
    header: str | None,
) -> None:
    markets = _markets([])
    service = _service(settings, markets, fake_clob)

    with pytest.raises(AuthError, match="Missing/invalid signature"):
        await service.execute(trade_body(), header)

    markets.get_markets.assert_not_called()
    fake_clob.ensure_api_creds.assert_not_called()


async def test_signature_mismatch_is_rejected_before_any_io(
    settings: Settings,
    fake_clob: SimpleNamespace,
    trade_body: Callable[..., bytes],
    sign: Callable[[bytes], str],
) -> None:
    markets = _markets([])
    service = _service(settings, markets, fake_clob)
    signed_body = trade_body()

    with pytest.raises(AuthError, match="Signature mismatch"):
        await service.execute(trade_body(amountUsd=1000), sign(signed_body))

    markets.get_markets.assert_not_called()
    fake_clob.post_order.assert_not_called()


async def test_unset_secret_rejects_everything(
    market_factory: Callable[..., dict[str, Any]],
    fake_clob: SimpleNamespace,
    trade_body: Callable[..., bytes],
    sign: Callable[[bytes], str],
) -> None:
    settings = Settings(_env_file=None)  # type: ignore[call-arg]
    service = _service(settings, _markets([market_factory()]), fake_clob)
    body = trade_body()

    with pytest.raises(AuthError, match="Signature mismatch"):
        await service.execute(body, sign(body))


async def test_zero_amount_is_missing(
    settings: Settings,
    fake_clob: SimpleNamespace,
    trade_body: Callable[..., bytes],
    sign: Callable[[bytes], str],
) -> None:
    markets = _markets([])
    service = _service(settings, markets, fake_clob)
    body = trade_body(amountUsd=0)

    with pytest.raises(ValidationError, match="Missing side/amountUsd/ask"):
        await service.execute(body, sign(body))

    markets.get_markets.assert_not_called()


async def test_negative_amount_is_rejected_before_submission(
    settings: Settings,
    market_factory: Callable[..., dict[str, Any]],
    fake_clob: SimpleNamespace,
    trade_body: Callable[..., bytes],
    sign: Callable[[bytes], str],
) -> None:
    service = _service(settings, _markets([market_factory()]), fake_clob)
    body = trade_body(amountUsd=-100)

    with pytest.raises(ValidationError, match="Computed size must be positive") as exc_info:
        await service.execute(body, sign(body))

    assert exc_info.value.status_code == 400
    fake_clob.ensure_api_creds.assert_not_called()
    fake_clob.create_order.assert_not_called()


async def test_no_trade_buys_the_no_outcome_token(
    settings: Settings,
    market_factory: Callable[..., dict[str, Any]],
    fake_clob: SimpleNamespace,
    trade_body: Callable[..., bytes],
    sign: Callable[[bytes], str],
    token_no: str,
) -> None:
    service = _service(settings, _markets([market_factory()]), fake_clob)
    body = trade_body(side="NO")

    execution = await service.execute(body, sign(body))

    order_args = fake_clob.create_order.await_args.args[0]
    assert order_args.token_id == token_no
    assert order_args.side == BUY
    assert order_args.size > 0
    assert execution.order.side == 1
    assert execution.to_wire()["fills"]["sharesBought"] > 0


async def test_empty_market_lookup_is_resolution_error(
    settings: Settings,
    fake_clob: SimpleNamespace,
    trade_body: Callable[..., bytes],
    sign: Callable[[bytes], str],
) -> None:
    service = _service(settings, _markets([]), fake_clob)
    body = trade_body()

    with pytest.raises(ResolutionError, match="No market found") as exc_info:
        await service.execute(body, sign(body))

    assert exc_info.value.status_code == 400
    fake_clob.ensure_api_creds.assert_not_called()
    fake_clob.create_order.assert_not_called()


async def test_non_positive_price_is_rejected_before_submission(
    settings: Settings,
    market_factory: Callable[..., dict[str, Any]],
    fake_clob: SimpleNamespace,
    trade_body: Callable[..., bytes],
    sign: Callable[[bytes], str],
) -> None:
    service = _service(settings, _markets([market_factory()]), fake_clob)
    body = trade_body(slippage=-1)

    with pytest.raises(ValidationError, match="Computed price must be positive"):
        await service.execute(body, sign(body))

    fake_clob.post_order.assert_not_called()


async def test_exchange_failure_is_submission_error(
    settings: Settings,
    market_factory: Callable[..., dict[str, Any]],
    fake_clob: SimpleNamespace,
    trade_body: Callable[..., bytes],
    sign: Callable[[bytes], str],
) -> None:
    fake_clob.post_order = AsyncMock(side_effect=RuntimeError("not enough balance / allowance"))
    service = _service(settings, _markets([market_factory()]), fake_clob)
    body = trade_body()

    with pytest.raises(SubmissionError) as exc_info:
        await service.execute(body, sign(body))

    assert exc_info.value.status_code == 502
    assert "not enough balance / allowance" in exc_info.value.message
    fake_clob.post_order.assert_awaited_once()


async def test_signature_covers_exact_raw_bytes(
    settings: Settings,
    market_factory: Callable[..., dict[str, Any]],
    fake_clob: SimpleNamespace,
    sign: Callable[[bytes], str],
) -> None:
    service = _service(settings, _markets([market_factory()]), fake_clob)
    compact = json.dumps({"side": "YES", "ask": 0.5, "amountUsd": 10, "marketId": "m"}).encode()
    spaced = json.dumps({"side": "YES", "ask": 0.5, "amountUsd": 10, "marketId": "m"}, indent=2).encode()

    with pytest.raises(AuthError):
        await service.execute(spaced, sign(compact))
