# -*- coding: utf-8 -*-
"""
Entry point for the HUD trade webhook.

Orchestrates: logging, settings, container, aiohttp server, shutdown (SIGINT or CancelledError).
Requests flow: POST /trade -> TradeService (signature, payload, Gamma resolution, CLOB order).

Run with: python -m poly_trader.main
"""
from __future__ import annotations

import asyncio
import signal
import structlog
from typing import Any
from aiohttp import web

from poly_trader.DI import Container
from poly_trader.config import get_settings
from poly_trader.exceptions import MissingRequiredConfigError
from poly_trader.logging.config import configure_logging


def _setup_sigint(shutdown_event: asyncio.Event) -> None:
    try:
        loop = asyncio.get_running_loop()
        for sig in (signal.SIGINT, signal.SIGTERM):
            loop.add_signal_handler(sig, shutdown_event.set)
    except NotImplementedError:
        pass  # Windows has no add_signal_handler


async def _do_shutdown(runner: web.AppRunner, logger: Any) -> None:
    """Clean shutdown. Safe to call on normal shutdown or CancelledError."""
    await runner.cleanup()
    logger.info("main_shutdown_complete")


async def run() -> None:
    settings = get_settings()
    configure_logging(settings)
    logger = structlog.get_logger("main")

    if not settings.polymarket.private_key:
        logger.error(
            "main_missing_private_key",
            message="POLYMARKET__PRIVATE_KEY is not set",
        )
        raise MissingRequiredConfigError("POLYMARKET__PRIVATE_KEY")
    if not settings.hud.shared_secret:
        # verify_hmac fails closed, so every /trade call will be rejected with 401.
        logger.warning(
            "main_missing_shared_secret",
            message="HUD__SHARED_SECRET is not set",
        )

    container = Container()
    app = container.web_app()
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, settings.server.host, settings.server.port)
    await site.start()

    shutdown_event = asyncio.Event()
    _setup_sigint(shutdown_event)
    logger.info(
        "main_server_started",
        host=settings.server.host,
        port=settings.server.port,
        clob_host=settings.polymarket.clob_host,
        chain_id=settings.polymarket.chain_id,
    )

    try:
        await shutdown_event.wait()
    except asyncio.CancelledError:
        await _do_shutdown(runner, logger)
        raise

    await _do_shutdown(runner, logger)


def main() -> None:
    asyncio.run(run())


__all__ = ["run", "main"]

if __name__ == "__main__":
    main()
