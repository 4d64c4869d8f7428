# -*- coding: utf-8 -*-
"""Trade webhook pipeline.

Stages run in order and each one can end the request:
signature -> payload -> market/token resolution -> order build -> submission.
"""

from __future__ import annotations

import structlog
from typing import TYPE_CHECKING, Any, Callable, Optional
from structlog.contextvars import bound_contextvars

from poly_trader.exceptions import AuthError, ResolutionError, SubmissionError
from poly_trader.security import extract_signature, verify_hmac
from poly_trader.services.order_execution import Fills, build_order, client_order_id
from poly_trader.services.trade.dto import TradeExecution
from poly_trader.services.trade.payload import parse_trade_request

if TYPE_CHECKING:
    from poly_trader.config import Settings
    from poly_trader.services.market_resolver import MarketResolver
    from poly_trader.services.order_execution import OrderSubmissionService


class TradeService:
    """Turns one signed HUD request into one CLOB order.

    Holds only read-only configuration and stateless collaborators, so a single
    instance serves concurrent requests.
    """

    def __init__(
        self,
        settings: "Settings",
        market_resolver: "MarketResolver",
        order_submission: "OrderSubmissionService",
        *,
        now_ms: Optional[Callable[[], int]] = None,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        """Initialize the service.

        Args:
            settings: Application settings (HUD secret, order defaults).
            market_resolver: Resolves market reference + side to a token.
            order_submission: Submits the built order.
            now_ms: Clock for client order ids (epoch milliseconds).
            get_logger: Logger factory (injected) with default of structlog.get_logger.
            logger_name: Optional logger name (defaults to class name).
        """
        self._settings = settings
        self._resolver = market_resolver
        self._submission = order_submission
        self._now_ms = now_ms
        self._logger = get_logger(logger_name or self.__class__.__name__)

    def authenticate(self, body: bytes, signature_header: Optional[str]) -> None:
        """Check the sha256=<hex> header against the HMAC of body.

        Raises:
            AuthError: Missing/malformed header, or signature mismatch.
        """
        presented = extract_signature(signature_header)
        if not verify_hmac(self._settings.hud.shared_secret, body, presented):
            raise AuthError("Signature mismatch")

    async def execute(self, body: bytes, signature_header: Optional[str]) -> TradeExecution:
        """Run the full pipeline for a raw /trade body.

        Raises:
            AuthError: 401.
            ValidationError: 400 (bad JSON, missing/invalid fields, unusable price or size).
            ResolutionError: 400.
            SubmissionError: 502.
        """
        try:
            self.authenticate(body, signature_header)
        except AuthError as e:
            self._logger.warning("trade_auth_rejected", error_message=e.message)
            raise

        request = parse_trade_request(
            body,
            default_slippage=self._settings.order_execution.default_slippage,
        )
        with bound_contextvars(
            trade_side=request.side,
            trade_condition_id=request.condition_id,
            trade_market_id=request.market_id,
        ):
            self._logger.info(
                "trade_request_received",
                ask=request.ask,
                amount_usd=request.amount_usd,
                slippage=request.slippage,
            )

            resolution = await self._resolver.resolve(
                request.side,
                condition_id=request.condition_id,
                market_id=request.market_id,
            )
            if not resolution.success or resolution.response is None:
                raise ResolutionError(resolution.error or "Market resolution failed")
            resolved = resolution.response

            order = build_order(
                resolved.token_id,
                request,
                client_order_id(
                    self._settings.order_execution.client_order_prefix,
                    now_ms=self._now_ms,
                ),
            )

            submission = await self._submission.submit(order)
            if not submission.success:
                raise SubmissionError(submission.error or "place() failed")

            execution = TradeExecution(
                acknowledgement=submission.response,
                order=order,
                fills=Fills.from_order(order.size, order.price),
                resolved=resolved,
            )
            self._logger.info(
                "trade_done",
                token_id=order.token_id,
                client_order_id=order.client_order_id,
                price=order.price,
                shares=order.size,
                cost_usd=execution.fills.cost_usd,
            )
            return execution
