# -*- coding: utf-8 -*-
"""Route handlers for the webhook."""

from __future__ import annotations

import time
import structlog
from typing import Any, Dict
from aiohttp import web

from poly_trader.exceptions import TradeRequestError
from poly_trader.web.keys import SETTINGS_KEY, TRADE_SERVICE_KEY

routes = web.RouteTableDef()

_logger = structlog.get_logger("web")


def json_response(obj: Dict[str, Any], status: int = 200) -> web.Response:
    return web.json_response(obj, status=status)


@routes.get("/health", allow_head=False)
async def health(request: web.Request) -> web.Response:
    settings = request.app[SETTINGS_KEY]
    return json_response({
        "ok": True,
        "name": settings.app.app_name,
        "time": time.time_ns() // 1_000_000,
    })


@routes.post("/trade")
async def trade(request: web.Request) -> web.Response:
    settings = request.app[SETTINGS_KEY]
    service = request.app[TRADE_SERVICE_KEY]

    signature = request.headers.get(settings.hud.signature_header)
    body = await request.read()
    try:
        execution = await service.execute(body, signature)
    except TradeRequestError as e:
        _logger.info("trade_rejected", http_status_code=e.status_code, error_message=e.message)
        return json_response({"ok": False, "error": e.message}, status=e.status_code)
    return json_response(execution.to_wire())
