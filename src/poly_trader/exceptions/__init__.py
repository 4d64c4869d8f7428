"""Exceptions subpackage."""

from poly_trader.exceptions.exceptions import (
    AuthError,
    MissingRequiredConfigError,
    PolymarketAPIError,
    PolyTraderError,
    ResolutionError,
    SubmissionError,
    TradeRequestError,
    ValidationError,
)

__all__ = [
    "AuthError",
    "MissingRequiredConfigError",
    "PolymarketAPIError",
    "PolyTraderError",
    "ResolutionError",
    "SubmissionError",
    "TradeRequestError",
    "ValidationError",
]
