# -*- coding: utf-8 -*-
"""Utility modules."""

from poly_trader.utils.pricing import (
    clamp01,
    compute_limit_price,
    compute_shares,
    is_tradable_price,
)
from poly_trader.utils.validation import mask_address

__all__ = [
    "clamp01",
    "compute_limit_price",
    "compute_shares",
    "is_tradable_price",
    "mask_address",
]
