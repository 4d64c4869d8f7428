# -*- coding: utf-8 -*-
"""Unit tests for OrderSubmissionService."""

from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import AsyncMock

from py_clob_client.clob_types import OrderArgs, OrderType  # type: ignore[import-untyped]
from py_clob_client.exceptions import PolyApiException  # type: ignore[import-untyped]
from py_clob_client.order_builder.constants import BUY  # type: ignore[import-untyped]

from poly_trader.models import Order
from poly_trader.services.order_execution import OrderSubmissionService


def _order(**overrides: object) -> Order:
    fields: dict[str, object] = {
        "token_id": "token-yes",
        "price": 0.51,
        "size": 196.08,
        "side": 0,
        "client_order_id": "hud-1",
    }
    fields.update(overrides)
    return Order(**fields)  # type: ignore[arg-type]


async def test_submit_ensures_creds_then_posts_fak_order(fake_clob: SimpleNamespace) -> None:
    service = OrderSubmissionService(fake_clob)  # type: ignore[arg-type]

    result = await service.submit(_order())

    assert result.success is True
    assert result.response == fake_clob.post_order.return_value
    fake_clob.ensure_api_creds.assert_awaited_once()
    order_args = fake_clob.create_order.await_args.args[0]
    assert isinstance(order_args, OrderArgs)
    assert order_args.token_id == "token-yes"
    assert order_args.price == 0.51
    assert order_args.size == 196.08
    assert order_args.side == BUY
    fake_clob.post_order.assert_awaited_once_with("signed-order", OrderType.FAK, False)


async def test_submit_buys_no_outcome_token(fake_clob: SimpleNamespace) -> None:
    service = OrderSubmissionService(fake_clob)  # type: ignore[arg-type]

    await service.submit(_order(token_id="token-no", side=1))

    order_args = fake_clob.create_order.await_args.args[0]
    assert order_args.token_id == "token-no"
    assert order_args.side == BUY


async def test_submit_reports_client_exception(fake_clob: SimpleNamespace) -> None:
    fake_clob.post_order = AsyncMock(side_effect=RuntimeError("insufficient balance"))
    service = OrderSubmissionService(fake_clob)  # type: ignore[arg-type]

    result = await service.submit(_order())

    assert result.success is False
    assert result.error == "place() failed: insufficient balance"


async def test_submit_reports_poly_api_error_message(fake_clob: SimpleNamespace) -> None:
    error = PolyApiException(error_msg="order couldn't be fully filled")
    fake_clob.post_order = AsyncMock(side_effect=error)
    service = OrderSubmissionService(fake_clob)  # type: ignore[arg-type]

    result = await service.submit(_order())

    assert result.success is False
    assert result.error is not None
    assert "order couldn't be fully filled" in result.error


async def test_submit_treats_credential_failure_as_submission_error(
    fake_clob: SimpleNamespace,
) -> None:
    fake_clob.ensure_api_creds = AsyncMock(side_effect=RuntimeError("L1 auth failed"))
    service = OrderSubmissionService(fake_clob)  # type: ignore[arg-type]

    result = await service.submit(_order())

    assert result.success is False
    assert result.error == "place() failed: L1 auth failed"
    fake_clob.create_order.assert_not_called()
    fake_clob.post_order.assert_not_called()
