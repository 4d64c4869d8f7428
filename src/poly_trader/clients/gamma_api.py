# -*- coding: utf-8 -*-
"""Polymarket Gamma API client (markets by condition_id or slug)."""

from __future__ import annotations

import structlog
from typing import TYPE_CHECKING, Any, Callable, Dict, Optional

from poly_trader.config import Settings

if TYPE_CHECKING:
    from .http import AsyncHttpClient


class GammaApiClient:
    """Client for Polymarket Gamma API /markets lookups."""

    def __init__(
        self,
        http_client: "AsyncHttpClient",
        settings: Settings,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        """Initialize the client.

        Args:
            http_client: Async HTTP client (e.g. AsyncHttpClient).
            settings: Application settings (uses settings.api.gamma_host,
                settings.api.gamma_markets_limit).
            get_logger: Logger factory (injected) with default of structlog.get_logger.
            logger_name: Optional logger name (defaults to class name).
        """
        self._http = http_client
        self._settings = settings
        self._logger = get_logger(logger_name or self.__class__.__name__)

    def _base_url(self) -> str:
        return self._settings.api.gamma_host.rstrip("/")

    def markets_params(
        self,
        *,
        condition_id: Optional[str] = None,
        slug: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Query parameters for an active-market lookup by condition_id or slug.

        condition_id takes precedence when both are given.

        Raises:
            ValueError: If neither condition_id nor slug is given.
        """
        params: Dict[str, Any] = {
            "limit": self._settings.api.gamma_markets_limit,
            "active": "true",
        }
        if condition_id:
            params["condition_ids"] = condition_id
        elif slug:
            params["slug"] = slug
        else:
            raise ValueError("condition_id or slug is required")
        return params

    async def get_markets(
        self,
        *,
        condition_id: Optional[str] = None,
        slug: Optional[str] = None,
    ) -> Any:
        """Fetch active markets matching condition_id (preferred) or slug.

        Returns:
            The decoded JSON body as served; normally a list of market dicts.

        Raises:
            PolymarketAPIError: On non-2xx status or transport failure.
        """
        params = self.markets_params(condition_id=condition_id, slug=slug)
        url = f"{self._base_url()}/markets"
        self._logger.debug("gamma_api_markets_request", **params)
        return await self._http.get(url, params=params)

