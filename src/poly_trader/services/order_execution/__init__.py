"""Order building and submission."""

from __future__ import annotations

from poly_trader.services.order_execution.dto import Fills, OrderResponse
from poly_trader.services.order_execution.order_builder import (
    build_order,
    client_order_id,
)
from poly_trader.services.order_execution.order_submission import (
    OrderSubmissionService,
)

__all__ = [
    "Fills",
    "OrderResponse",
    "OrderSubmissionService",
    "build_order",
    "client_order_id",
]
