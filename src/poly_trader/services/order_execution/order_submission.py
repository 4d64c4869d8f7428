# -*- coding: utf-8 -*-
"""Order submission service."""

from __future__ import annotations

import structlog
from typing import TYPE_CHECKING, Any, Callable, Dict, Optional

from py_clob_client.clob_types import OrderArgs, OrderType  # type: ignore[import-untyped]
from py_clob_client.order_builder.constants import BUY  # type: ignore[import-untyped]
from py_clob_client.exceptions import PolyApiException  # type: ignore[import-untyped]

from poly_trader.models import Order, TimeInForce
from poly_trader.services.order_execution.dto import OrderResponse
from poly_trader.services.result import ServiceResult

if TYPE_CHECKING:
    from poly_trader.clients import AsyncClobClient

# Order.side picks the outcome (0 YES, 1 NO); the resolved outcome token is always bought.
CLOB_SIDE = BUY

# Immediate-or-cancel is fill-and-kill on the CLOB.
CLOB_ORDER_TYPES: Dict[TimeInForce, Any] = {"IOC": OrderType.FAK}


class OrderSubmissionService:
    """Submits one Order through the CLOB. One attempt, no retries."""

    def __init__(
        self,
        clob_client: "AsyncClobClient",
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        self._client = clob_client
        self._logger = get_logger(logger_name or self.__class__.__name__)

    async def submit(self, order: Order) -> "ServiceResult[Any]":
        """Ensure API creds, then sign and post order once.

        Args:
            order: Order built for this request.

        Returns:
            ServiceResult whose response is the raw acknowledgement from the
            exchange, or whose error carries the underlying failure message.
        """
        result = ServiceResult[Any]()
        try:
            await self._client.ensure_api_creds()
            signed = await self._client.create_order(
                OrderArgs(
                    token_id=order.token_id,
                    price=order.price,
                    size=order.size,
                    side=CLOB_SIDE,
                )
            )
            ack = await self._client.post_order(
                signed,
                CLOB_ORDER_TYPES[order.time_in_force],
                order.post_only,
            )
            result.success = True
            result.response = ack

            summary = OrderResponse.from_response(ack)
            self._logger.info(
                "order_submit_done",
                token_id=order.token_id,
                client_order_id=order.client_order_id,
                price=order.price,
                size=order.size,
                side=order.side,
                order_id=summary.order_id,
                status=summary.status,
                exchange_success=summary.success,
            )
        except PolyApiException as e:
            error_msg = getattr(e, "error_msg", None)
            message = str(error_msg) if error_msg is not None else str(e)
            result.error = f"place() failed: {message}"
            self._logger.warning(
                "order_submit_failed",
                token_id=order.token_id,
                client_order_id=order.client_order_id,
                error_type=type(e).__name__,
                error_message=message,
                status_code=getattr(e, "status_code", None),
            )
        except Exception as e:
            result.error = f"place() failed: {e}"
            self._logger.exception(
                "order_submit_exception",
                token_id=order.token_id,
                client_order_id=order.client_order_id,
                error_type=type(e).__name__,
                error_message=str(e),
            )
        return result
