"""Logging subpackage."""

from poly_trader.logging.config import configure_logging

__all__ = ["configure_logging"]
