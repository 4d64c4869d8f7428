"""Models for order execution."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class Fills:
    """Fill summary computed from the submitted order (not read back from the exchange)."""

    shares_bought: float
    avg_price: float
    cost_usd: float

    @classmethod
    def from_order(cls, size: float, price: float) -> Fills:
        return cls(shares_bought=size, avg_price=price, cost_usd=size * price)

    def to_wire(self) -> dict[str, Any]:
        return {
            "sharesBought": self.shares_bought,
            "avgPrice": self.avg_price,
            "costUsd": self.cost_usd,
        }


@dataclass
class OrderResponse:
    """Fields of interest in a PostOrder acknowledgement (used for logging)."""

    success: bool = False
    error_msg: str | None = None
    order_id: str | None = None
    transactions_hashes: list[str] = field(default_factory=list)
    status: str | None = None
    taking_amount: str | None = None
    making_amount: str | None = None

    @classmethod
    def from_response(cls, response: Any) -> OrderResponse:
        if not isinstance(response, dict):
            return cls()

        return cls(
            success=response.get("success", False),
            error_msg=response.get("errorMsg", None),
            order_id=response.get("orderID", None),
            transactions_hashes=response.get("transactionsHashes", []),
            status=response.get("status", None),
            taking_amount=response.get("takingAmount", None),
            making_amount=response.get("makingAmount", None),
        )
