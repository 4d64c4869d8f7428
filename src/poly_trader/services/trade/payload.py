# -*- coding: utf-8 -*-
"""Parse and check the /trade JSON body."""

from __future__ import annotations

import json
import math
from typing import Any, Dict, Optional, cast

from poly_trader.exceptions import ValidationError
from poly_trader.models import TRADE_SIDES, TradeRequest, TradeSide

DEFAULT_SLIPPAGE = 0.01


def _to_number(value: Any, field: str) -> float:
    if isinstance(value, bool):
        raise ValidationError(f"{field} must be a number")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field} must be a number") from None
    if not math.isfinite(number):
        raise ValidationError(f"{field} must be a finite number")
    return number


def _to_identifier(value: Any) -> Optional[str]:
    if not value:
        return None
    return str(value).strip() or None


def parse_trade_request(
    body: str | bytes,
    *,
    default_slippage: float = DEFAULT_SLIPPAGE,
) -> TradeRequest:
    """Decode body into a TradeRequest.

    Falsy means missing: side, amountUsd and ask must all be truthy, so a
    numeric 0 for amountUsd or ask is rejected like an absent field. A falsy
    slippage falls back to default_slippage.

    Raises:
        ValidationError: Bad JSON, missing fields, bad side or non-numeric values.
    """
    try:
        payload = json.loads(body)
    except (UnicodeDecodeError, json.JSONDecodeError):
        raise ValidationError("Bad JSON") from None
    if not isinstance(payload, dict):
        raise ValidationError("Bad JSON")
    data = cast(Dict[str, Any], payload)

    side = data.get("side")
    amount_usd = data.get("amountUsd")
    ask = data.get("ask")
    if not side or not amount_usd or not ask:
        raise ValidationError("Missing side/amountUsd/ask")
    if side not in TRADE_SIDES:
        raise ValidationError("side must be YES or NO")

    raw_slippage = data.get("slippage")
    slippage = _to_number(raw_slippage, "slippage") if raw_slippage else default_slippage

    return TradeRequest(
        side=cast(TradeSide, side),
        ask=_to_number(ask, "ask"),
        amount_usd=_to_number(amount_usd, "amountUsd"),
        slippage=slippage,
        condition_id=_to_identifier(data.get("conditionId")),
        market_id=_to_identifier(data.get("marketId")),
    )
