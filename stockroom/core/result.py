"""Result Values: explicit success-or-error returns for repository operations.

Invariants:
    - A Result is exactly one of Success(value) or Failure(error)
    - Failure.error is always a StockroomError
    - unwrap() on a Failure raises the carried error unchanged

Design Decisions:
    - Frozen dataclasses over a single tagged class: isinstance checks and
      match statements read naturally at call sites
    - No combinators: callers branch on is_success
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from stockroom.core.errors import StockroomError

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    """A completed operation and its value."""

    value: T

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False

    @property
    def error(self) -> None:
        return None

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Failure:
    """A rejected operation and the error that explains why."""

    error: StockroomError

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True

    @property
    def value(self) -> None:
        return None

    def unwrap(self):
        """Raise the carried error."""
        raise self.error


Result = Union[Success[T], Failure]
