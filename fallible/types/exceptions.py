"""
Centralized exception hierarchy for fallible.

Domain failures are ordinary ``Failure`` values and never raise. The classes
here cover the two remaining cases: programmer errors (contract violations,
such as unwrapping the wrong variant) and invalid library configuration.
"""

from datetime import UTC, datetime

# Type alias for error context data
type ErrorContextData = str | int | float | bool | datetime | None
type ErrorContextDict = dict[str, ErrorContextData]


class FallibleError(Exception):
    """
    Base exception for all errors raised by fallible itself.

    Provides common attributes for error reporting and context tracking.
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        context: ErrorContextDict | None = None,
        recoverable: bool = True,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.context = context or {}
        self.recoverable = recoverable
        self.timestamp = datetime.now(UTC)

    def get_error_context(self) -> ErrorContextDict:
        """Get structured error context for logging and debugging."""
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "context": str(self.context),
            "recoverable": self.recoverable,
            "timestamp": self.timestamp.isoformat(),
        }


class ContractViolationError(FallibleError, AssertionError):
    """
    A caller broke the API contract.

    Signals a bug at the call site rather than an expected outcome, so it is
    never recoverable and the settle adapters always let it propagate.
    """

    def __init__(self, message: str, **kwargs: ErrorContextData):
        super().__init__(message, recoverable=False, **kwargs)


class UnwrapError(ContractViolationError):
    """An extraction accessor was called on the wrong variant."""

    def __init__(
        self,
        message: str,
        accessor: str,
        tag: str,
        **kwargs: ErrorContextData,
    ):
        super().__init__(message, **kwargs)
        self.accessor = accessor
        self.tag = tag

    def get_error_context(self) -> ErrorContextDict:
        context = super().get_error_context()
        context.update({"accessor": self.accessor, "tag": self.tag})
        return context


class ConfigurationError(FallibleError):
    """Invalid configuration read from the environment."""

    def __init__(
        self,
        message: str,
        setting_name: str | None = None,
        **kwargs: ErrorContextData,
    ):
        super().__init__(message, **kwargs)
        self.setting_name = setting_name

    def get_error_context(self) -> ErrorContextDict:
        context = super().get_error_context()
        context["setting_name"] = self.setting_name
        return context


__all__ = [
    "ConfigurationError",
    "ContractViolationError",
    "ErrorContextData",
    "ErrorContextDict",
    "FallibleError",
    "UnwrapError",
]
