# -*- coding: utf-8 -*-
"""Dependency injection container (dependency-injector)."""

from __future__ import annotations

from dependency_injector import containers, providers

from poly_trader.config import Settings, get_settings
from poly_trader.clients.clob_client import AsyncClobClient
from poly_trader.clients.gamma_api import GammaApiClient
from poly_trader.clients.gamma_cache import GammaMarketCache
from poly_trader.clients.http import AsyncHttpClient
from poly_trader.services.market_resolver import MarketResolver
from poly_trader.services.order_execution import OrderSubmissionService
from poly_trader.services.trade import TradeService
from poly_trader.web import create_app


def _build_gamma_cache(settings: Settings, gamma_client: GammaApiClient) -> GammaMarketCache:
    """Build the /markets cache with TTL and size from settings."""
    return GammaMarketCache(
        gamma_client,
        ttl_seconds=settings.api.gamma_cache_ttl_seconds,
        maxsize=settings.api.gamma_cache_maxsize,
    )


class Container(containers.DeclarativeContainer):
    """Application container. Wires settings, HTTP/Gamma/CLOB clients, trade pipeline and web app."""

    config = providers.Callable(get_settings)

    http_client = providers.Singleton(
        AsyncHttpClient,
        settings=config,
    )

    gamma_api_client = providers.Singleton(
        GammaApiClient,
        http_client=http_client,
        settings=config,
    )

    gamma_cache = providers.Singleton(_build_gamma_cache, config, gamma_api_client)

    clob_client = providers.Singleton(
        AsyncClobClient,
        settings=config,
    )

    market_resolver = providers.Singleton(
        MarketResolver,
        markets=gamma_cache,
    )

    order_submission_service = providers.Singleton(
        OrderSubmissionService,
        clob_client=clob_client,
    )

    trade_service = providers.Singleton(
        TradeService,
        settings=config,
        market_resolver=market_resolver,
        order_submission=order_submission_service,
    )

    web_app = providers.Singleton(
        create_app,
        settings=config,
        trade_service=trade_service,
        http_client=http_client,
    )
