"""
Core value types for fallible.

This module exposes the Result type with its two variants, the Unit marker
type, and the exception hierarchy used for contract violations.
"""

from .exceptions import (
    ConfigurationError,
    ContractViolationError,
    FallibleError,
    UnwrapError,
)
from .result import Err, Failure, Ok, Result, ResultTag, Success, failure, success
from .unit import UNIT, Unit

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
    "failure",
    "success",
]
