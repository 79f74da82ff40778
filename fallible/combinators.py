"""
Combinators over collections of Results.

All helpers short-circuit in iteration order and only use the public Result
API, so they work with any mix of ``Success`` and ``Failure`` values.
"""

from collections.abc import Callable, Iterable

from .types.result import Failure, Result, Success


def sequence_results[T, E](results: Iterable[Result[T, E]]) -> Result[list[T], E]:
    """Transform an iterable of Results into a Result of a list.

    Returns a Failure with the first error found, or a Success with all values.
    Iteration stops at the first Failure.
    """
    values: list[T] = []
    for result in results:
        if result.is_failure():
            return Failure(result.unwrap_failure())
        values.append(result.unwrap())
    return Success(values)


def traverse_results[A, T, E](
    items: Iterable[A],
    op: Callable[[A], Result[T, E]],
) -> Result[list[T], E]:
    """Apply ``op`` to each item and sequence the results.

    ``op`` is not called for items after the first Failure.
    """
    return sequence_results(op(item) for item in items)


def partition_results[T, E](
    results: Iterable[Result[T, E]],
) -> tuple[list[T], list[E]]:
    """Split Results into (success values, failure values), keeping order."""
    values: list[T] = []
    errors: list[E] = []
    for result in results:
        if result.is_success():
            values.append(result.unwrap())
        else:
            errors.append(result.unwrap_failure())
    return values, errors


__all__ = ["partition_results", "sequence_results", "traverse_results"]
