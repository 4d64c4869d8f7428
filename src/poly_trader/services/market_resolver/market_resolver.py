# -*- coding: utf-8 -*-
"""Resolve a market reference and trade side to a CLOB token id."""

from __future__ import annotations

import json
import math
import structlog
from typing import Any, Callable, Dict, List, Optional, Protocol, cast
from structlog.contextvars import bound_contextvars

from poly_trader.exceptions import PolymarketAPIError
from poly_trader.models import TradeSide
from poly_trader.services.market_resolver.dto import ResolvedToken
from poly_trader.services.result import ServiceResult
from poly_trader.utils import clamp01

# Outcome labels accepted per side, matched trimmed and case-sensitive.
OUTCOME_NAMES: Dict[TradeSide, tuple[str, ...]] = {
    "YES": ("Up", "Yes", "YES"),
    "NO": ("Down", "No", "NO"),
}

# Slot used when no outcome label matches.
FALLBACK_INDEX: Dict[TradeSide, int] = {"YES": 0, "NO": 1}


class MarketSource(Protocol):
    """Anything that can look up Gamma markets (GammaApiClient, GammaMarketCache)."""

    async def get_markets(
        self,
        *,
        condition_id: Optional[str] = None,
        slug: Optional[str] = None,
    ) -> Any: ...


class MarketResolver:
    """Maps (condition id | slug, side) to the outcome token to trade.

    Never raises: every failure, including network errors, comes back as a
    failed ServiceResult with a readable message.
    """

    def __init__(
        self,
        markets: MarketSource,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        self._markets = markets
        self._logger = get_logger(logger_name or self.__class__.__name__)

    async def resolve(
        self,
        side: TradeSide,
        *,
        condition_id: Optional[str] = None,
        market_id: Optional[str] = None,
    ) -> ServiceResult[ResolvedToken]:
        """Resolve the token for side in the market named by condition_id or market_id (slug).

        Args:
            side: "YES" or "NO".
            condition_id: Market condition id; preferred when both are given.
            market_id: Market slug.

        Returns:
            ServiceResult with a ResolvedToken on success, or an error message.
        """
        if not condition_id and not market_id:
            return ServiceResult.fail("No conditionId/marketId to resolve tokenId")

        with bound_contextvars(
            resolve_condition_id=condition_id,
            resolve_market_id=market_id,
            resolve_side=side,
        ):
            try:
                if condition_id:
                    data = await self._markets.get_markets(condition_id=condition_id)
                else:
                    data = await self._markets.get_markets(slug=market_id)
                result = self._resolve_from_markets(data, side)
            except PolymarketAPIError as e:
                if e.status_code is not None:
                    result = ServiceResult.fail(f"Gamma API {e.status_code}")
                else:
                    result = ServiceResult.fail(f"resolveTokenId error: {e}")
            except Exception as e:
                self._logger.exception(
                    "market_resolve_exception",
                    error_type=type(e).__name__,
                    error_message=str(e),
                )
                result = ServiceResult.fail(f"resolveTokenId error: {e}")

            if result.success and result.response is not None:
                self._logger.info(
                    "market_resolve_done",
                    token_id=result.response.token_id,
                    outcome_index=result.response.outcome_index,
                    price_from_book=result.response.price_from_book,
                )
            else:
                self._logger.warning("market_resolve_failed", error_message=result.error)
        return result

    @classmethod
    def _resolve_from_markets(cls, data: Any, side: TradeSide) -> ServiceResult[ResolvedToken]:
        if not isinstance(data, list) or not data:
            return ServiceResult.fail("No market found")
        first = cast(List[Any], data)[0]
        market: Dict[str, Any] = cast(Dict[str, Any], first) if isinstance(first, dict) else {}

        index = cls.outcome_index(market.get("outcomes"), side)
        token_id = cls._token_id_at(market.get("tokens"), index)
        if not token_id:
            return ServiceResult.fail("Missing tokenId")

        return ServiceResult.ok(
            ResolvedToken(
                token_id=token_id,
                outcome_index=index,
                price_from_book=cls._best_ask_at(market.get("best_ask"), index),
            )
        )

    @classmethod
    def outcome_index(cls, outcomes: Any, side: TradeSide) -> int:
        """Slot of the first outcome labelled for side, else 0 for YES and 1 for NO."""
        wanted = OUTCOME_NAMES[side]
        for i, outcome in enumerate(cls._outcome_labels(outcomes)):
            if str(outcome).strip() in wanted:
                return i
        return FALLBACK_INDEX[side]

    @staticmethod
    def _outcome_labels(outcomes: Any) -> List[Any]:
        # Gamma serves outcomes as a JSON-encoded string, e.g. '["Yes", "No"]'.
        if isinstance(outcomes, str):
            try:
                outcomes = json.loads(outcomes)
            except json.JSONDecodeError:
                return []
        if not isinstance(outcomes, list):
            return []
        return cast(List[Any], outcomes)

    @staticmethod
    def _token_id_at(tokens: Any, index: int) -> Optional[str]:
        if not isinstance(tokens, list) or index >= len(tokens):
            return None
        token = cast(List[Any], tokens)[index]
        if not isinstance(token, dict):
            return None
        token = cast(Dict[str, Any], token)
        value = token.get("token_id") or token.get("tokenId")
        return str(value) if value else None

    @staticmethod
    def _best_ask_at(best_ask: Any, index: int) -> Optional[float]:
        if not isinstance(best_ask, list) or index >= len(best_ask):
            return None
        raw = cast(List[Any], best_ask)[index]
        if raw is None:
            return None
        # Blank strings count as a zero ask.
        if isinstance(raw, str) and not raw.strip():
            return 0.0
        try:
            value = float(raw)
        except (TypeError, ValueError):
            return None
        if not math.isfinite(value):
            return None
        return clamp01(value)
