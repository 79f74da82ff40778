#!/usr/bin/env python3
"""
Settle Example

Wraps a mock asynchronous operation (standing in for network or file I/O)
into Results and composes the outcomes with combinators.

Features demonstrated:
- Converting a delayed coroutine into Success/Failure with settle_async
- The as_result decorator on a coroutine function
- Unit as the payload of an operation with no meaningful return value
- Recovering with unwrap_or, or_else and map_failure
"""

import asyncio
import logging

from fallible import UNIT, Result, Unit, as_result, settle_async, success
from fallible.config import get_settings
from fallible.logging_config import setup_logging

logger = logging.getLogger(__name__)


class MockError(Exception):
    """Failure raised by the mock operation."""

    def __init__(self, msg: str):
        super().__init__(msg)
        self.msg = msg

    def __eq__(self, other: object) -> bool:
        return isinstance(other, MockError) and other.msg == self.msg

    def __hash__(self) -> int:
        return hash(self.msg)


async def mock_logic[T](value: T, msg: str, should_fail: bool = False) -> T:
    """Resolve to ``value`` after a short delay, or raise MockError."""
    await asyncio.sleep(0.1)
    if should_fail:
        raise MockError(msg)
    return value


async def int_result(should_fail: bool) -> Result[int, MockError]:
    return await settle_async(
        mock_logic(5, "cannot get int value", should_fail=should_fail),
        catch=(MockError,),
    )


@as_result(MockError)
async def unit_result(should_fail: bool) -> Unit:
    await mock_logic(None, "cannot get unit value", should_fail=should_fail)
    return UNIT


async def main() -> None:
    setup_logging(get_settings())

    ok = await int_result(False)
    print(f"int_result(False)        -> {ok}")
    print(f"  contains(5)            -> {ok.contains(5)}")
    print(f"  map(str)               -> {ok.map(str)!r}")

    err = await int_result(True)
    print(f"int_result(True)         -> {err}")
    print(f"  unwrap_or(0)           -> {err.unwrap_or(0)}")
    print(f"  map_failure(msg)       -> {err.map_failure(lambda e: e.msg)!r}")
    print(f"  or_else(recover)       -> {err.or_else(lambda e: success(len(e.msg)))}")

    done = await unit_result(False)
    print(f"unit_result(False)       -> {done}")
    print(f"  contains(Unit())       -> {done.contains(Unit())}")

    failed = await unit_result(True)
    print(f"unit_result(True)        -> {failed}")

    try:
        failed.unwrap()
    except AssertionError as exc:
        logger.warning("unwrap on a Failure is a bug: %s", exc)


if __name__ == "__main__":
    asyncio.run(main())
