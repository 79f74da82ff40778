"""
Settle adapters: convert raising or awaitable code into Results.

This is the single boundary where exceptions become ``Failure`` values. Each
wrapped call or awaitable is settled exactly once, at its completion point;
retries, timeouts and cancellation belong to the operation being wrapped.

Contract violations (``ContractViolationError``, e.g. unwrapping the wrong
variant) are bugs and always propagate, even when ``catch`` would match them.
"""

from __future__ import annotations

import functools
import inspect
import logging
from collections.abc import Awaitable, Callable
from typing import Any

from fallible.config import captured_failure_logging_enabled
from fallible.types.exceptions import ContractViolationError
from fallible.types.result import Failure, Result, Success

logger = logging.getLogger(__name__)

type ExceptionTypes = tuple[type[BaseException], ...]

DEFAULT_CATCH: ExceptionTypes = (Exception,)


def _to_failure(
    exc: BaseException,
    map_error: Callable[[BaseException], Any] | None,
) -> Failure[Any, Any]:
    if captured_failure_logging_enabled():
        logger.debug("Captured %s as Failure: %s", type(exc).__name__, exc)
    return Failure(map_error(exc) if map_error is not None else exc)


def settle[T](
    func: Callable[..., T],
    *args: Any,
    catch: ExceptionTypes = DEFAULT_CATCH,
    map_error: Callable[[BaseException], Any] | None = None,
    **kwargs: Any,
) -> Result[T, Any]:
    """
    Call ``func`` and capture its outcome as a Result.

    Args:
        func: Callable to invoke with ``*args`` and ``**kwargs``
        catch: Exception types converted to Failure; others propagate
        map_error: Optional conversion applied to a caught exception

    Returns:
        Success with the return value, or Failure with the (mapped) exception
    """
    try:
        value = func(*args, **kwargs)
    except ContractViolationError:
        raise
    except catch as exc:
        return _to_failure(exc, map_error)
    return Success(value)


async def settle_async[T](
    awaitable: Awaitable[T],
    catch: ExceptionTypes = DEFAULT_CATCH,
    map_error: Callable[[BaseException], Any] | None = None,
) -> Result[T, Any]:
    """
    Await ``awaitable`` and capture its settled outcome as a Result.

    ``asyncio.CancelledError`` derives from BaseException, so cancellation
    propagates under the default ``catch``.

    Raises:
        ContractViolationError: If ``awaitable`` cannot be awaited
    """
    if not inspect.isawaitable(awaitable):
        raise ContractViolationError(
            f"settle_async() expects an awaitable, got {type(awaitable).__name__}"
        )
    try:
        value = await awaitable
    except ContractViolationError:
        raise
    except catch as exc:
        return _to_failure(exc, map_error)
    return Success(value)


def as_result(
    *exceptions: type[BaseException],
    map_error: Callable[[BaseException], Any] | None = None,
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """
    Decorator turning a raising function into one that returns a Result.

    Coroutine functions are wrapped with ``settle_async`` and stay awaitable;
    plain functions are wrapped with ``settle``.

    Args:
        *exceptions: Exception types to capture (default: Exception)
        map_error: Optional conversion applied to a caught exception

    Example:
        @as_result(ValueError)
        def parse(text: str) -> int:
            return int(text)

        parse("5")    # Success(5)
        parse("five") # Failure(ValueError(...))
    """
    catch = exceptions or DEFAULT_CATCH

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        if inspect.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Result[Any, Any]:
                return await settle_async(
                    func(*args, **kwargs), catch=catch, map_error=map_error
                )

            return async_wrapper

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Result[Any, Any]:
            return settle(func, *args, catch=catch, map_error=map_error, **kwargs)

        return wrapper

    return decorator


__all__ = ["DEFAULT_CATCH", "as_result", "settle", "settle_async"]
