"""Models for market resolution."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ResolvedToken:
    """Outcome token chosen for a trade side.

    price_from_book is the Gamma best ask for the chosen slot, clamped to [0, 1].
    It is advisory and never replaces the caller's ask.
    """

    token_id: str
    outcome_index: int
    price_from_book: float | None = None
