"""Dependency injection."""

from poly_trader.DI.container import Container

__all__ = ["Container"]
