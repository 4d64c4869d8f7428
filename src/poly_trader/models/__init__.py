# -*- coding: utf-8 -*-
"""Domain models."""

from poly_trader.models.order import SIDE_CODES, Order, OrderSideCode, TimeInForce
from poly_trader.models.trade_request import TRADE_SIDES, TradeRequest, TradeSide

__all__ = [
    "Order",
    "OrderSideCode",
    "SIDE_CODES",
    "TimeInForce",
    "TRADE_SIDES",
    "TradeRequest",
    "TradeSide",
]
