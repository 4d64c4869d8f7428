"""Custom exceptions for the trade webhook and Polymarket APIs."""

from __future__ import annotations


class PolyTraderError(Exception):
    """Base exception for poly-trader errors."""

    pass


class MissingRequiredConfigError(PolyTraderError):
    """Raised when a required configuration value is missing."""

    pass


class PolymarketAPIError(PolyTraderError):
    """Raised when a Polymarket HTTP API request fails."""

    def __init__(
        self,
        message: str,
        *,
        url: str | None = None,
        status_code: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code
        self.cause = cause


class TradeRequestError(PolyTraderError):
    """A /trade request was refused. Rendered as {ok: false, error} with status_code."""

    status_code: int = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class AuthError(TradeRequestError):
    """Missing, malformed or mismatched HUD signature."""

    status_code = 401


class ValidationError(TradeRequestError):
    """Malformed body, missing fields, bad side or unusable computed price or size."""

    status_code = 400


class ResolutionError(TradeRequestError):
    """Market or token lookup failed."""

    status_code = 400


class SubmissionError(TradeRequestError):
    """The exchange rejected or errored on order placement."""

    status_code = 502
