# -*- coding: utf-8 -*-
"""Async facade for Polymarket CLOB (py_clob_client) with asyncio.to_thread."""

from poly_trader.clients.clob_client.clob_client import AsyncClobClient

__all__ = ["AsyncClobClient"]
