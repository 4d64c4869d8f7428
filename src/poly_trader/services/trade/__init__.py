"""Trade webhook pipeline."""

from __future__ import annotations

from poly_trader.services.trade.dto import TradeExecution
from poly_trader.services.trade.payload import DEFAULT_SLIPPAGE, parse_trade_request
from poly_trader.services.trade.trade_service import TradeService

__all__ = [
    "DEFAULT_SLIPPAGE",
    "TradeExecution",
    "TradeService",
    "parse_trade_request",
]
