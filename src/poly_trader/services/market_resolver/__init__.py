"""Market/token resolution via the Gamma API."""

from __future__ import annotations

from poly_trader.services.market_resolver.dto import ResolvedToken
from poly_trader.services.market_resolver.market_resolver import (
    OUTCOME_NAMES,
    MarketResolver,
)

__all__ = [
    "MarketResolver",
    "OUTCOME_NAMES",
    "ResolvedToken",
]
