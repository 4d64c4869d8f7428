"""Typed application keys shared by the app factory and handlers."""

from __future__ import annotations

from aiohttp import web

from poly_trader.config import Settings
from poly_trader.services.trade import TradeService

SETTINGS_KEY = web.AppKey("settings", Settings)
TRADE_SERVICE_KEY = web.AppKey("trade_service", TradeService)
