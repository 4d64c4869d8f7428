"""Stage result shared by services that report failures instead of raising."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass
class ServiceResult(Generic[T]):
    """Outcome of a service call: response on success, error message otherwise."""

    success: bool = False
    response: T | None = None
    error: str | None = None

    @classmethod
    def ok(cls, response: T) -> ServiceResult[T]:
        return cls(success=True, response=response)

    @classmethod
    def fail(cls, error: str) -> ServiceResult[T]:
        return cls(success=False, error=error)
