"""Price and size helpers for outcome tokens (prices live in [0, 1])."""

from __future__ import annotations

import math
from typing import Any


def clamp01(x: Any) -> float:
    """Bound x to [0, 1]. Non-numeric or non-finite input returns nan."""
    try:
        value = float(x)
    except (TypeError, ValueError):
        return math.nan
    if not math.isfinite(value):
        return math.nan
    return max(0.0, min(1.0, value))


def compute_limit_price(ask: float, slippage: float) -> float:
    """Limit price tolerating `slippage` (fraction) above the reference ask."""
    return clamp01(float(ask) * (1 + float(slippage)))


def compute_shares(amount_usd: float, price: float) -> float:
    """Shares bought with amount_usd at price. Caller guarantees price > 0."""
    return amount_usd / price


def is_tradable_price(price: float) -> bool:
    """True for a finite, strictly positive price."""
    return math.isfinite(price) and price > 0
