# -*- coding: utf-8 -*-
"""Short-lived cache for Gamma /markets lookups."""

from __future__ import annotations

import structlog
from typing import Any, Callable, Optional, Tuple
from cachetools import TTLCache
from structlog.contextvars import bound_contextvars

from poly_trader.clients.gamma_api import GammaApiClient


class GammaMarketCache:
    """Serves repeated /markets lookups from memory for a few seconds.

    Uses cachetools.TTLCache; only successful responses are cached. A TTL of 0
    disables caching and every call goes to the API. Staleness is bounded by the
    TTL and the caller re-validates prices with its own ask.
    """

    def __init__(
        self,
        gamma_client: GammaApiClient,
        *,
        ttl_seconds: float = 3.0,
        maxsize: int = 512,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        """Initialize the cache.

        Args:
            gamma_client: Gamma API client (injected).
            ttl_seconds: Seconds a lookup stays fresh.
            maxsize: Maximum number of cached lookups.
            get_logger: Logger factory (injected) with default of structlog.get_logger.
            logger_name: Optional logger name (defaults to class name).
        """
        self._client = gamma_client
        self._enabled = ttl_seconds > 0
        self._cache: TTLCache[Tuple[str, str], Any] = TTLCache(
            maxsize=max(1, maxsize),
            ttl=max(ttl_seconds, 0.001),
        )
        self._logger = get_logger(logger_name or self.__class__.__name__)

    async def get_markets(
        self,
        *,
        condition_id: Optional[str] = None,
        slug: Optional[str] = None,
    ) -> Any:
        """Same contract as GammaApiClient.get_markets, cached by (field, value)."""
        key = ("condition_ids", condition_id) if condition_id else ("slug", slug or "")
        if self._enabled:
            cached = self._cache.get(key)
            if cached is not None:
                self._logger.debug("gamma_cache_hit", gamma_cache_key=key[0], gamma_cache_value=key[1])
                return cached

        with bound_contextvars(gamma_cache_key=key[0], gamma_cache_value=key[1]):
            data = await self._client.get_markets(condition_id=condition_id, slug=slug)
            if self._enabled:
                self._cache[key] = data
            self._logger.debug("gamma_cache_miss")
        return data
