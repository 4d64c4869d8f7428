# -*- coding: utf-8 -*-
"""Async facade for Polymarket CLOB (py_clob_client) with asyncio.to_thread.

Centralizes ClobClient construction from settings and runs all sync methods
in a thread pool so callers can use async/await without blocking the event loop.

Only the trading surface the webhook needs is exposed: create_or_derive_api_creds,
set_api_creds, create_order and post_order.
"""

from __future__ import annotations

import asyncio
import structlog
from typing import TYPE_CHECKING, Any, Callable, Optional, TypeVar, cast

from py_clob_client.clob_types import OrderType  # type: ignore[import-untyped]

from poly_trader.config import Settings
from poly_trader.exceptions import MissingRequiredConfigError
from poly_trader.utils import mask_address

if TYPE_CHECKING:
    from py_clob_client.client import ClobClient  # type: ignore[import-untyped]
    from py_clob_client.clob_types import (  # type: ignore[import-untyped]
        ApiCreds,
        OrderArgs,
        PartialCreateOrderOptions,
        SignedOrder,
    )

T = TypeVar("T")


def _build_sync_client(settings: Settings) -> "ClobClient":
    """Build a sync ClobClient (Level 1: signer only) from settings.

    API credentials are not taken from config; they are created or derived
    from the signer on demand (see AsyncClobClient.ensure_api_creds).

    Raises:
        MissingRequiredConfigError: If POLYMARKET__PRIVATE_KEY is not set.
    """
    from py_clob_client.client import ClobClient  # type: ignore[import-untyped]

    pm = settings.polymarket
    if not pm.private_key:
        raise MissingRequiredConfigError("POLYMARKET__PRIVATE_KEY")

    return ClobClient(
        host=pm.clob_host,
        chain_id=pm.chain_id,
        key=pm.private_key,
        signature_type=pm.signature_type,
        funder=pm.funder,
    )


class AsyncClobClient:
    """Async wrapper around py_clob_client.ClobClient. All methods run via asyncio.to_thread."""

    def __init__(
        self,
        settings: Settings,
        *,
        sync_client: Optional["ClobClient"] = None,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        """Initialize from settings or an existing sync ClobClient.

        Args:
            settings: Application settings (used if sync_client is None).
            sync_client: Optional pre-built ClobClient. If None, builds from settings.
            get_logger: Logger factory (injected) with default of structlog.get_logger.
            logger_name: Optional logger name (defaults to class name).
        """
        self._settings = settings
        if sync_client is not None:
            self._client = sync_client
        else:
            self._client = _build_sync_client(settings)
        self._logger = get_logger(logger_name or self.__class__.__name__)

    async def _run(self, fn: Callable[..., T], *args: Any, **kwargs: Any) -> T:
        """Run a sync call in a thread. Use for any py_clob_client method."""
        return await asyncio.to_thread(fn, *args, **kwargs)

    # --- Credentials ---

    async def create_or_derive_api_creds(self) -> "ApiCreds":
        """Create or derive API credentials for the signer. Returns ApiCreds."""
        return await self._run(self._client.create_or_derive_api_creds)

    def set_api_creds(self, creds: "ApiCreds") -> None:
        """Set API credentials on the client (sync; no I/O)."""
        self._client.set_api_creds(creds)

    async def ensure_api_creds(self) -> None:
        """Create or derive API creds and set them on the shared client.

        Runs on every submission against the process-wide ClobClient. Derived
        creds are deterministic for one signer, so concurrent calls set the same
        value and the shared state stays consistent.
        """
        creds = await self.create_or_derive_api_creds()
        self.set_api_creds(creds)
        self._logger.debug(
            "clob_api_creds_ready",
            signer_masked=mask_address(self._signer_address()),
        )

    def _signer_address(self) -> Optional[str]:
        get_address = getattr(self._client, "get_address", None)
        if get_address is None:
            return None
        address = get_address()
        return str(address) if address else None

    # --- Orders ---

    async def create_order(
        self,
        order_args: "OrderArgs",
        options: Optional["PartialCreateOrderOptions"] = None,
    ) -> "SignedOrder":
        """Create a signed limit order (OrderArgs). Returns signed order."""
        return await self._run(self._client.create_order, order_args, options)

    async def post_order(
        self,
        signed_order: "SignedOrder",
        order_type: OrderType,
        post_only: bool = False,
    ) -> Any:
        """Post a signed order (e.g. OrderType.FAK for immediate-or-cancel). Returns the raw acknowledgement."""
        return await self._run(
            cast(Callable[..., Any], self._client.post_order),
            signed_order,
            order_type,
            post_only,
        )
