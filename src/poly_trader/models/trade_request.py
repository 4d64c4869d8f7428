# -*- coding: utf-8 -*-
"""Trade instruction sent by the HUD."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

TradeSide = Literal["YES", "NO"]

TRADE_SIDES: tuple[TradeSide, ...] = ("YES", "NO")


@dataclass(frozen=True, slots=True)
class TradeRequest:
    """Validated /trade payload.

    condition_id wins over market_id (a Gamma slug) when both are set.
    """

    side: TradeSide
    ask: float
    amount_usd: float
    slippage: float = 0.01
    condition_id: str | None = None
    market_id: str | None = None
