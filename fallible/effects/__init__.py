"""
Effect boundaries for fallible.

Adapters that run raising or asynchronous code and settle its outcome into a
Result exactly once.
"""

from .settle import DEFAULT_CATCH, as_result, settle, settle_async

__all__ = ["DEFAULT_CATCH", "as_result", "settle", "settle_async"]
