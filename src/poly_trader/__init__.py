"""poly-trader: HMAC-signed webhook that places Polymarket CLOB orders."""

from poly_trader.clients import (
    AsyncClobClient,
    AsyncHttpClient,
    GammaApiClient,
    GammaMarketCache,
)
from poly_trader.config import get_settings
from poly_trader.DI import Container
from poly_trader.services import TradeService
from poly_trader.web import create_app

__version__ = "0.1.0"
__all__ = [
    "AsyncClobClient",
    "AsyncHttpClient",
    "GammaApiClient",
    "GammaMarketCache",
    "Container",
    "TradeService",
    "create_app",
    "get_settings",
]
