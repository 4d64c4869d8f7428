"""Result of a completed /trade request."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from poly_trader.models import Order
from poly_trader.services.market_resolver import ResolvedToken
from poly_trader.services.order_execution import Fills


@dataclass(frozen=True, slots=True)
class TradeExecution:
    """Exchange acknowledgement plus what this service computed for the order."""

    acknowledgement: Any
    order: Order
    fills: Fills
    resolved: ResolvedToken

    def to_wire(self) -> dict[str, Any]:
        """JSON body for a successful /trade response."""
        meta: dict[str, Any] = {
            "tokenId": self.resolved.token_id,
            "clientOrderId": self.order.client_order_id,
        }
        if self.resolved.price_from_book is not None:
            meta["priceFromBook"] = self.resolved.price_from_book
        return {
            "ok": True,
            "order": self.acknowledgement,
            "fills": self.fills.to_wire(),
            "meta": meta,
        }
