"""HTTP and API clients."""

from poly_trader.clients.clob_client import AsyncClobClient
from poly_trader.clients.gamma_api import GammaApiClient
from poly_trader.clients.gamma_cache import GammaMarketCache
from poly_trader.clients.http import AsyncHttpClient

__all__ = [
    "AsyncClobClient",
    "AsyncHttpClient",
    "GammaApiClient",
    "GammaMarketCache",
]
