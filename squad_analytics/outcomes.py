"""
Typed outcomes for calls that may fail with a known analytics error.

The pipeline wraps each external step in an Outcome and branches on the
error kind instead of suppressing exceptions.
"""

from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar

from squad_analytics.errors import AnalyticsError

T = TypeVar("T")


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """Either a value or the AnalyticsError that prevented it."""
    value: Optional[T] = None
    error: Optional[AnalyticsError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "Outcome[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: AnalyticsError) -> "Outcome[T]":
        return cls(error=error)

    def failed_with(self, *error_types) -> bool:
        """True when the outcome failed with one of the given error types."""
        return self.error is not None and isinstance(self.error, error_types)


def attempt(func: Callable[..., T], *args: Any, **kwargs: Any) -> Outcome[T]:
    """
    Call func and capture an AnalyticsError as a failed Outcome.

    Any other exception propagates unchanged.
    """
    try:
        return Outcome.success(func(*args, **kwargs))
    except AnalyticsError as e:
        return Outcome.failure(e)
