# -*- coding: utf-8 -*-
"""Async HTTP client for Polymarket read APIs (single attempt, no retries)."""

from __future__ import annotations

import asyncio
import uuid
import aiohttp
import structlog
from typing import Any, Callable, Dict, Optional
from structlog.contextvars import bound_contextvars

from poly_trader.config import Settings
from poly_trader.exceptions import PolymarketAPIError


class AsyncHttpClient:
    """Async HTTP client for Polymarket APIs.

    Injects Settings and optionally an aiohttp.ClientSession. If no session
    is provided, one is created lazily and must be closed via aclose() or used
    as an async context manager.

    Each call is attempted once; callers report failures to their own callers.
    """

    def __init__(
        self,
        settings: Settings,
        *,
        session: Optional[aiohttp.ClientSession] = None,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        """Initialize the client.

        Args:
            settings: Configuration (timeout).
            session: Optional shared aiohttp session. If None, the client
                creates and owns a session (call aclose() when done).
            get_logger: Logger factory (injected) with default of structlog.get_logger.
            logger_name: Optional logger name (defaults to class name).
        """
        self._settings = settings
        self._session = session
        self._owns_session = session is None
        self._logger = get_logger(logger_name or self.__class__.__name__)

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            timeout = aiohttp.ClientTimeout(total=self._settings.api.timeout_seconds)
            self._session = aiohttp.ClientSession(timeout=timeout)
        return self._session

    async def aclose(self) -> None:
        """Close the session if this client owns it."""
        if self._owns_session and self._session is not None and not self._session.closed:
            await self._session.close()
            self._session = None

    async def __aenter__(self) -> AsyncHttpClient:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    async def get(
        self,
        url: str,
        *,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Perform a GET request and return parsed JSON.

        Args:
            url: Full URL to request.
            params: Optional query parameters.

        Returns:
            Parsed JSON response (dict or list).

        Raises:
            PolymarketAPIError: On a non-2xx status (status_code set) or a
                transport error (status_code None).
        """
        params = params or {}
        request_id = uuid.uuid4().hex[:12]

        with bound_contextvars(http_url=url, http_request_id=request_id):
            try:
                session = await self._get_session()
                async with session.get(url, params=params) as response:
                    if response.status >= 400:
                        self._logger.warning(
                            "http_get_bad_status",
                            http_status_code=response.status,
                        )
                        raise PolymarketAPIError(
                            f"GET {url} returned {response.status}",
                            url=url,
                            status_code=response.status,
                        )
                    return await response.json(content_type=None)
            except (aiohttp.ClientError, asyncio.TimeoutError) as e:
                self._logger.warning(
                    "http_get_failed",
                    error_type=type(e).__name__,
                    error_message=str(e),
                )
                raise PolymarketAPIError(
                    f"GET failed: {url}: {e}",
                    url=url,
                    cause=e,
                ) from e
