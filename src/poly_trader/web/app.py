# -*- coding: utf-8 -*-
"""aiohttp application factory."""

from __future__ import annotations

import structlog
from typing import TYPE_CHECKING, Awaitable, Callable, Optional
from aiohttp import web

from poly_trader.web.keys import SETTINGS_KEY, TRADE_SERVICE_KEY
from poly_trader.web.routes import json_response, routes

if TYPE_CHECKING:
    from poly_trader.clients import AsyncHttpClient
    from poly_trader.config import Settings
    from poly_trader.services.trade import TradeService

Handler = Callable[[web.Request], Awaitable[web.StreamResponse]]

_logger = structlog.get_logger("web")


@web.middleware
async def error_middleware(request: web.Request, handler: Handler) -> web.StreamResponse:
    """Plain 404 for unknown routes and methods; 500 JSON for anything unhandled."""
    try:
        return await handler(request)
    except (web.HTTPNotFound, web.HTTPMethodNotAllowed):
        return web.Response(status=404, text="Not found")
    except web.HTTPException:
        raise
    except Exception as e:
        _logger.exception(
            "request_unhandled_exception",
            http_method=request.method,
            http_path=request.path,
            error_type=type(e).__name__,
            error_message=str(e),
        )
        return json_response({"ok": False, "error": str(e)}, status=500)


def create_app(
    settings: "Settings",
    trade_service: "TradeService",
    *,
    http_client: Optional["AsyncHttpClient"] = None,
) -> web.Application:
    """Build the webhook application.

    Args:
        settings: Application settings.
        trade_service: Pipeline handling POST /trade.
        http_client: Shared HTTP client closed on application cleanup, if given.
    """
    app = web.Application(middlewares=[error_middleware])
    app[SETTINGS_KEY] = settings
    app[TRADE_SERVICE_KEY] = trade_service
    app.add_routes(routes)

    if http_client is not None:
        async def _close_http_client(_: web.Application) -> None:
            await http_client.aclose()

        app.on_cleanup.append(_close_http_client)
    return app
