"""
Result type for returning success or failure from services without raising.

Team generation failures are part of the normal contract (an empty roster, too
few players for the requested teams), so services report them as values and
leave it to the caller to retry, adjust the request, or surface the error.

Usage:
    return Result.ok(teams)
    return Result.fail(
        "Need at least 5 players, but only 3 available",
        code=error_codes.INSUFFICIENT_PLAYERS,
        details={"required": 5, "available": 3},
    )

    result = service.generate_teams(players, 3)
    if result:
        for team in result.value:
            ...
    elif result.error_code == error_codes.INSUFFICIENT_PLAYERS:
        ...
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Outcome of a service call.

    Attributes:
        success: Whether the operation succeeded
        value: The return value if successful
        error: Human-readable error message if failed
        error_code: Machine-readable code from services.error_codes
        details: Structured error parameters (e.g. required/available counts)
    """

    success: bool
    value: T | None = None
    error: str | None = None
    error_code: str | None = None
    details: dict[str, Any] | None = None

    @classmethod
    def ok(cls, value: T | None = None) -> "Result[T]":
        return cls(success=True, value=value)

    @classmethod
    def fail(
        cls,
        error: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> "Result[T]":
        return cls(success=False, error=error, error_code=code, details=details)

    def __bool__(self) -> bool:
        return self.success

    def unwrap(self) -> T:
        """
        Get the value, raising ValueError if the result is a failure.

        Raises:
            ValueError: If the result is a failure
        """
        if not self.success:
            raise ValueError(f"Cannot unwrap failed result ({self.error_code}): {self.error}")
        return self.value  # type: ignore

    def unwrap_or(self, default: T) -> T:
        return self.value if self.success else default  # type: ignore

    def map(self, fn: Callable[[T], "Result"]) -> "Result":
        """
        Chain another fallible step onto a successful result.

        Failures pass through unchanged.
        """
        if not self.success:
            return self
        return fn(self.value)  # type: ignore
