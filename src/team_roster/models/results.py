"""Result values returned by the roster service."""

from dataclasses import dataclass
from typing import Generic, TypeVar

from team_roster.errors import ErrorKind, RosterError

T = TypeVar("T")


@dataclass(frozen=True)
class RosterResult(Generic[T]):
    """Outcome of a roster operation.

    Exactly one of ``value`` (on success) or ``error`` (on failure) is
    meaningful. ``message`` is suitable for display when ``error`` is set.
    """

    ok: bool
    value: T | None = None
    error: ErrorKind | None = None
    message: str | None = None

    @classmethod
    def success(cls, value: T | None = None) -> "RosterResult[T]":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, exc: RosterError) -> "RosterResult[T]":
        return cls(ok=False, error=exc.kind, message=exc.message)
