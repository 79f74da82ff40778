"""
Result type for explicit, inspectable failure propagation.

A ``Result[T, E]`` is either a ``Success`` holding a value of type ``T`` or a
``Failure`` holding an error of type ``E``. Both variants are frozen: every
combinator returns a new ``Result`` (or a plain value) and never mutates its
receiver.

Monad laws (``and_then`` is bind, ``success`` is return):
1. Left identity: success(a).and_then(f) == f(a)
2. Right identity: m.and_then(success) == m
3. Associativity: m.and_then(f).and_then(g) == m.and_then(lambda x: f(x).and_then(g))

Exceptions raised inside callbacks passed to a combinator propagate to the
caller untouched. Converting raised exceptions into ``Failure`` values is the
job of the settle adapters in ``fallible.effects.settle``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from .exceptions import UnwrapError


class ResultTag(Enum):
    """Discriminant of a Result."""

    SUCCESS = "Success"
    FAILURE = "Failure"


class Result[T, E](ABC):
    """Base class for the two Result variants."""

    @property
    @abstractmethod
    def tag(self) -> ResultTag:
        """Which variant this is."""

    def is_success(self) -> bool:
        """Check if this is a success result."""
        return self.tag is ResultTag.SUCCESS

    def is_failure(self) -> bool:
        """Check if this is a failure result."""
        return self.tag is ResultTag.FAILURE

    def is_ok(self) -> bool:
        """Check if this is a success result (alias for is_success)."""
        return self.is_success()

    def is_err(self) -> bool:
        """Check if this is a failure result (alias for is_failure)."""
        return self.is_failure()

    @abstractmethod
    def contains(self, candidate: T) -> bool:
        """Return True if this is a Success whose value equals ``candidate``."""

    @abstractmethod
    def contains_failure(self, candidate: E) -> bool:
        """Return True if this is a Failure whose error equals ``candidate``."""

    @abstractmethod
    def unwrap(self) -> T:
        """
        Return the success value.

        Raises:
            UnwrapError: If called on a Failure. This is a contract violation,
                not a domain failure; prefer ``unwrap_or``/``unwrap_or_else``
                when the Failure path is expected.
        """

    @abstractmethod
    def unwrap_failure(self) -> E:
        """
        Return the failure value.

        Raises:
            UnwrapError: If called on a Success.
        """

    @abstractmethod
    def unwrap_or(self, default: T) -> T:
        """
        Return the success value or ``default``.

        ``default`` is evaluated by the caller before the call; use
        ``unwrap_or_else`` when computing it is expensive.
        """

    @abstractmethod
    def unwrap_or_else(self, fallback: Callable[[E], T]) -> T:
        """Return the success value or ``fallback(error)``."""

    @abstractmethod
    def map[U](self, op: Callable[[T], U]) -> Result[U, E]:
        """Apply ``op`` to a success value, leaving a failure untouched."""

    @abstractmethod
    def map_failure[F](self, op: Callable[[E], F]) -> Result[T, F]:
        """Apply ``op`` to a failure value, leaving a success untouched."""

    @abstractmethod
    def map_or[U](self, default: U, op: Callable[[T], U]) -> U:
        """
        Return ``op(value)`` for a Success, otherwise ``default``.

        Like ``unwrap_or``, ``default`` is evaluated eagerly regardless of the
        variant. Use ``map_or_else`` for a lazily computed fallback.
        """

    @abstractmethod
    def map_or_else[U](self, fallback: Callable[[E], U], op: Callable[[T], U]) -> U:
        """Return ``op(value)`` for a Success or ``fallback(error)`` for a Failure."""

    @abstractmethod
    def and_[U](self, next_result: Result[U, E]) -> Result[U, E]:
        """
        Return ``next_result`` if this is a Success, else this failure.

        ``next_result`` is already built when passed in. Callers that need to
        avoid constructing it on the Failure path should use ``and_then``.
        """

    @abstractmethod
    def and_then[U](self, op: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Chain ``op`` on a success value; short-circuit on a failure."""

    def flat_map[U](self, op: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Alias for and_then."""
        return self.and_then(op)

    @abstractmethod
    def or_[F](self, next_result: Result[T, F]) -> Result[T, F]:
        """Return this success, or ``next_result`` if this is a Failure."""

    @abstractmethod
    def or_else[F](self, op: Callable[[E], Result[T, F]]) -> Result[T, F]:
        """Recover from a failure with ``op``; short-circuit on a success."""


@dataclass(frozen=True)
class Success[T, E](Result[T, E]):
    """Success result containing a value."""

    value: T

    @property
    def tag(self) -> ResultTag:
        return ResultTag.SUCCESS

    def contains(self, candidate: T) -> bool:
        return self.value == candidate

    def contains_failure(self, candidate: E) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_failure(self) -> E:
        raise UnwrapError(
            f"called unwrap_failure() on a Success value: {self.value!r}",
            accessor="unwrap_failure",
            tag=self.tag.value,
        )

    def unwrap_or(self, default: T) -> T:
        return self.value

    def unwrap_or_else(self, fallback: Callable[[E], T]) -> T:
        return self.value

    def map[U](self, op: Callable[[T], U]) -> Result[U, E]:
        return Success(op(self.value))

    def map_failure[F](self, op: Callable[[E], F]) -> Result[T, F]:
        return Success(self.value)

    def map_or[U](self, default: U, op: Callable[[T], U]) -> U:
        return op(self.value)

    def map_or_else[U](self, fallback: Callable[[E], U], op: Callable[[T], U]) -> U:
        return op(self.value)

    def and_[U](self, next_result: Result[U, E]) -> Result[U, E]:
        return next_result

    def and_then[U](self, op: Callable[[T], Result[U, E]]) -> Result[U, E]:
        return op(self.value)

    def or_[F](self, next_result: Result[T, F]) -> Result[T, F]:
        return Success(self.value)

    def or_else[F](self, op: Callable[[E], Result[T, F]]) -> Result[T, F]:
        return Success(self.value)

    def __hash__(self) -> int:
        return hash((ResultTag.SUCCESS.value, self.value))

    def __str__(self) -> str:
        return f"Success({self.value})"

    def __repr__(self) -> str:
        return f"Success({self.value!r})"


@dataclass(frozen=True)
class Failure[T, E](Result[T, E]):
    """Failure result containing an error."""

    error: E

    @property
    def tag(self) -> ResultTag:
        return ResultTag.FAILURE

    def contains(self, candidate: T) -> bool:
        return False

    def contains_failure(self, candidate: E) -> bool:
        return self.error == candidate

    def unwrap(self) -> T:
        raise UnwrapError(
            f"called unwrap() on a Failure value: {self.error!r}",
            accessor="unwrap",
            tag=self.tag.value,
        )

    def unwrap_failure(self) -> E:
        return self.error

    def unwrap_or(self, default: T) -> T:
        return default

    def unwrap_or_else(self, fallback: Callable[[E], T]) -> T:
        return fallback(self.error)

    def map[U](self, op: Callable[[T], U]) -> Result[U, E]:
        return Failure(self.error)

    def map_failure[F](self, op: Callable[[E], F]) -> Result[T, F]:
        return Failure(op(self.error))

    def map_or[U](self, default: U, op: Callable[[T], U]) -> U:
        return default

    def map_or_else[U](self, fallback: Callable[[E], U], op: Callable[[T], U]) -> U:
        return fallback(self.error)

    def and_[U](self, next_result: Result[U, E]) -> Result[U, E]:
        return Failure(self.error)

    def and_then[U](self, op: Callable[[T], Result[U, E]]) -> Result[U, E]:
        return Failure(self.error)

    def or_[F](self, next_result: Result[T, F]) -> Result[T, F]:
        return next_result

    def or_else[F](self, op: Callable[[E], Result[T, F]]) -> Result[T, F]:
        return op(self.error)

    def __hash__(self) -> int:
        return hash((ResultTag.FAILURE.value, self.error))

    def __str__(self) -> str:
        return f"Failure({self.error})"

    def __repr__(self) -> str:
        return f"Failure({self.error!r})"


def success[T, E](value: T) -> Result[T, E]:
    """Create a success result."""
    return Success(value)


def failure[T, E](error: E) -> Result[T, E]:
    """Create a failure result."""
    return Failure(error)


# Aliases for convenience
Ok = success
Err = failure


__all__ = [
    "Err",
    "Failure",
    "Ok",
    "Result",
    "ResultTag",
    "Success",
    "failure",
    "success",
]
