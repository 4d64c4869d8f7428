"""HTTP surface (aiohttp.web): /health and /trade."""

from poly_trader.web.app import create_app, error_middleware
from poly_trader.web.keys import SETTINGS_KEY, TRADE_SERVICE_KEY

__all__ = ["SETTINGS_KEY", "TRADE_SERVICE_KEY", "create_app", "error_middleware"]
