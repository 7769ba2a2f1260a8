"""Result pattern and domain errors for set queries.

Queries over the set collection can fail in three well-known ways: a record
has no theme where one is required, the collection is empty where a record is
required, or a name is empty where a character is required. This module gives
those failures names and provides the Result wrapper the query bus uses to
report them as values instead of aborting the caller.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Generic, TypeVar, cast

T = TypeVar('T')  # Success type
E = TypeVar('E', bound=Exception)  # Error type


class Result(ABC, Generic[T, E]):
    """Abstract base class for Result pattern.

    A Result represents either a successful operation with a value,
    or a failed operation with an error.
    """

    @abstractmethod
    def is_success(self) -> bool:
        """Check if the result is a success."""
        ...

    @abstractmethod
    def is_failure(self) -> bool:
        """Check if the result is a failure."""
        ...

    @abstractmethod
    def value(self) -> T:
        """Get the success value.

        Raises:
            ValueError: If the result is a failure.
        """
        ...

    @abstractmethod
    def error(self) -> E:
        """Get the error.

        Raises:
            ValueError: If the result is a success.
        """
        ...


@dataclass(frozen=True, slots=True)
class Success(Result[T, E]):
    """Represents a successful operation with a value."""
    _value: T

    def __repr__(self) -> str:
        return f"Success({self._value!r})"

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False

    def value(self) -> T:
        return self._value

    def error(self) -> E:
        raise ValueError("Cannot get error from Success result")


@dataclass(frozen=True, slots=True)
class Failure(Result[T, E]):
    """Represents a failed operation with an error."""
    _error: E

    def __repr__(self) -> str:
        return f"Failure({self._error!r})"

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True

    def value(self) -> T:
        raise ValueError(f"Cannot get value from Failure result: {self._error}")

    def error(self) -> E:
        return self._error


def try_catch(fn: Callable[[], T], error_class: type[E] | tuple[type[E], ...] = Exception) -> Result[T, E]:
    """Execute a function and catch exceptions of specific type(s).

    Returns:
        Success(value) if no exception, Failure(exception) if caught
    """
    try:
        return Success(fn())
    except error_class as e:
        return Failure(cast(E, e))


def partition(results: list[Result[T, E]]) -> tuple[list[T], list[E]]:
    """Partition a list of Results into successes and failures."""
    successes = []
    failures = []

    for result in results:
        if result.is_success():
            successes.append(result.value())
        else:
            failures.append(result.error())

    return successes, failures


class DomainError(Exception):
    """Base class for domain-specific errors."""
    pass


class ValidationError(DomainError):
    """Raised when a query argument is invalid."""
    pass


class NotFoundError(DomainError):
    """Raised when no handler is registered for a query."""
    pass


class MissingThemeError(DomainError):
    """Raised when a query needs a theme and a record has none."""

    def __init__(self, number: str | None):
        self.number = number
        super().__init__(f"Set {number or '<unnumbered>'} has no theme")


class EmptyCollectionError(DomainError):
    """Raised when a query needs at least one record and there are none."""
    pass


class EmptyNameError(DomainError):
    """Raised when a record name is empty or missing where a character is required."""

    def __init__(self, number: str | None):
        self.number = number
        super().__init__(f"Set {number or '<unnumbered>'} has an empty name")
