# -*- coding: utf-8 -*-
"""Unit tests for the AsyncClobClient facade."""

from __future__ import annotations

import asyncio
from unittest.mock import MagicMock

import pytest
from py_clob_client.clob_types import OrderType  # type: ignore[import-untyped]

from poly_trader.clients import AsyncClobClient
from poly_trader.config import PolymarketClobSettings, Settings
from poly_trader.exceptions import MissingRequiredConfigError


def _sync_client() -> MagicMock:
    sync = MagicMock()
    sync.create_or_derive_api_creds.return_value = "creds"
    sync.get_address.return_value = "0x2d27b6e21b3d4d7c9a43fdf58f12345678907706"
    sync.create_order.return_value = "signed"
    sync.post_order.return_value = {"success": True, "orderID": "0x1"}
    return sync


async def test_ensure_api_creds_derives_and_sets(settings: Settings) -> None:
    sync = _sync_client()
    client = AsyncClobClient(settings, sync_client=sync)

    await client.ensure_api_creds()
    await client.ensure_api_creds()

    assert sync.create_or_derive_api_creds.call_count == 2
    sync.set_api_creds.assert_called_with("creds")


async def test_concurrent_ensure_api_creds_set_the_same_creds(settings: Settings) -> None:
    sync = _sync_client()
    client = AsyncClobClient(settings, sync_client=sync)

    await asyncio.gather(*(client.ensure_api_creds() for _ in range(5)))

    assert sync.set_api_creds.call_count == 5
    assert {call.args[0] for call in sync.set_api_creds.call_args_list} == {"creds"}


async def test_create_and_post_order_run_underlying_calls(settings: Settings) -> None:
    sync = _sync_client()
    client = AsyncClobClient(settings, sync_client=sync)

    signed = await client.create_order("order-args")  # type: ignore[arg-type]
    ack = await client.post_order(signed, OrderType.FAK)

    sync.create_order.assert_called_once_with("order-args", None)
    sync.post_order.assert_called_once_with("signed", OrderType.FAK, False)
    assert ack == {"success": True, "orderID": "0x1"}


def test_missing_private_key_is_reported() -> None:
    settings = Settings(
        _env_file=None,  # type: ignore[call-arg]
        polymarket=PolymarketClobSettings(private_key=None),
    )

    with pytest.raises(MissingRequiredConfigError, match="POLYMARKET__PRIVATE_KEY"):
        AsyncClobClient(settings)
