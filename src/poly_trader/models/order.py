# -*- coding: utf-8 -*-
"""Order record submitted to the CLOB for one webhook call."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from poly_trader.models.trade_request import TradeSide

OrderSideCode = Literal[0, 1]
TimeInForce = Literal["IOC"]

SIDE_CODES: dict[TradeSide, OrderSideCode] = {"YES": 0, "NO": 1}


@dataclass(frozen=True, slots=True)
class Order:
    """Immediate-or-cancel order built fresh per request and submitted once.

    side follows the exchange's numeric codes (0 for YES, 1 for NO).
    """

    token_id: str
    price: float
    size: float
    side: OrderSideCode
    client_order_id: str
    time_in_force: TimeInForce = "IOC"
    post_only: bool = False
