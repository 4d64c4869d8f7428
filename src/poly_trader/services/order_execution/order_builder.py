# -*- coding: utf-8 -*-
"""Order construction: slippage-adjusted price, share size, side code, client id."""

from __future__ import annotations

import math
import time
from typing import Callable

from poly_trader.exceptions import ValidationError
from poly_trader.models import SIDE_CODES, Order, TradeRequest
from poly_trader.utils import compute_limit_price, compute_shares, is_tradable_price


def client_order_id(prefix: str = "hud", *, now_ms: Callable[[], int] | None = None) -> str:
    """Timestamp-derived id, e.g. hud-1760875200000. Unique per request, not across bursts."""
    ms = now_ms() if now_ms is not None else time.time_ns() // 1_000_000
    return f"{prefix}-{ms}"


def build_order(token_id: str, request: TradeRequest, client_id: str) -> Order:
    """Build the IOC order for request against token_id.

    price = clamp01(ask * (1 + slippage)); size = amount_usd / price.

    Raises:
        ValidationError: If the computed price or size is nan or not strictly positive.
    """
    price = compute_limit_price(request.ask, request.slippage)
    if not is_tradable_price(price):
        raise ValidationError("Computed price must be positive")
    size = compute_shares(request.amount_usd, price)
    if not math.isfinite(size) or size <= 0:
        raise ValidationError("Computed size must be positive")
    return Order(
        token_id=token_id,
        price=price,
        size=size,
        side=SIDE_CODES[request.side],
        client_order_id=client_id,
    )
