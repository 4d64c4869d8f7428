# -*- coding: utf-8 -*-
"""Application services."""

from poly_trader.services.result import ServiceResult
from poly_trader.services.market_resolver import MarketResolver, ResolvedToken
from poly_trader.services.order_execution import Fills, OrderSubmissionService
from poly_trader.services.trade import TradeExecution, TradeService

__all__ = [
    "Fills",
    "MarketResolver",
    "OrderSubmissionService",
    "ResolvedToken",
    "ServiceResult",
    "TradeExecution",
    "TradeService",
]
