"""
fallible: explicit success/failure values for Python.

``Result[T, E]`` holds either a success value or a failure value, with
combinators for mapping, chaining, defaulting and branching on the variant.
Raising or asynchronous code is brought into the Result world at a single
boundary with ``settle``, ``settle_async`` or the ``as_result`` decorator.

Usage:
    from fallible import as_result, failure, success

    success(2).and_then(lambda x: success(x * x)).unwrap_or(0)  # 4
    failure("boom").map(lambda x: x + 1).unwrap_or(0)           # 0

    @as_result(ValueError)
    def parse(text: str) -> int:
        return int(text)
"""

import logging

from .combinators import partition_results, sequence_results, traverse_results
from .effects.settle import as_result, settle, settle_async
from .types import (
    UNIT,
    ConfigurationError,
    ContractViolationError,
    Err,
    Failure,
    FallibleError,
    Ok,
    Result,
    ResultTag,
    Success,
    Unit,
    UnwrapError,
    failure,
    success,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "UNIT",
    "ConfigurationError",
    "ContractViolationError",
    "Err",
    "Failure",
    "FallibleError",
    "Ok",
    "Result",
    "ResultTag",
    "Success",
    "Unit",
    "UnwrapError",
    "__version__",
    "as_result",
    "failure",
    "partition_results",
    "sequence_results",
    "settle",
    "settle_async",
    "success",
    "traverse_results",
]
