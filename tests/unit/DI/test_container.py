# -*- coding: utf-8 -*-
"""Wiring tests for the dependency injection container."""

from __future__ import annotations

from types import SimpleNamespace

from aiohttp import web
from dependency_injector import providers

from poly_trader.DI import Container
from poly_trader.clients import GammaMarketCache
from poly_trader.config import Settings
from poly_trader.services import TradeService
from poly_trader.web import SETTINGS_KEY, TRADE_SERVICE_KEY


def test_container_builds_web_app(settings: Settings, fake_clob: SimpleNamespace) -> None:
    container = Container()
    container.config.override(providers.Object(settings))
    container.clob_client.override(providers.Object(fake_clob))

    app = container.web_app()

    assert isinstance(app, web.Application)
    assert app[SETTINGS_KEY] is settings
    assert isinstance(app[TRADE_SERVICE_KEY], TradeService)
    assert app[TRADE_SERVICE_KEY] is container.trade_service()
    assert isinstance(container.gamma_cache(), GammaMarketCache)
