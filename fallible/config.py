"""
Configuration for fallible.

Settings are read from environment variables (optionally seeded from a
``.env`` file) and validated into an immutable ``Settings`` value. Every
builder returns a ``Result`` so invalid configuration is reported as data
instead of being raised from deep inside the parser.

Environment variables:
    FALLIBLE_LOG_LEVEL: Level for the ``fallible`` logger (default WARNING).
    FALLIBLE_LOG_CAPTURED_FAILURES: Log exceptions captured by the settle
        adapters at DEBUG level (default false).
    FALLIBLE_LOG_FORMAT: Format string for the handler installed by
        ``setup_logging``.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from .types.exceptions import ConfigurationError
from .types.result import Failure, Result, Success

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

LOG_LEVEL_ENV = "FALLIBLE_LOG_LEVEL"
LOG_CAPTURED_FAILURES_ENV = "FALLIBLE_LOG_CAPTURED_FAILURES"
LOG_FORMAT_ENV = "FALLIBLE_LOG_FORMAT"


@dataclass(frozen=True)
class SettingError:
    """An environment variable that failed validation."""

    setting_name: str
    message: str

    def __str__(self) -> str:
        return f"{self.setting_name}: {self.message}"


def validate_log_level(value: str) -> Result[str, str]:
    """Normalize a log level name, rejecting unknown levels."""
    level = value.strip().upper()
    if level not in VALID_LOG_LEVELS:
        return Failure(
            f"Invalid log level: {value}. "
            f"Expected one of {', '.join(VALID_LOG_LEVELS)}"
        )
    return Success(level)


def validate_log_format(value: str) -> Result[str, str]:
    if not value.strip():
        return Failure("Log format cannot be empty")
    return Success(value)


@dataclass(frozen=True)
class Settings:
    """Validated library settings."""

    log_level: str = "WARNING"
    log_captured_failures: bool = False
    log_format: str = DEFAULT_LOG_FORMAT

    @classmethod
    def create(
        cls,
        log_level: str = "WARNING",
        log_captured_failures: bool = False,
        log_format: str = DEFAULT_LOG_FORMAT,
    ) -> Result["Settings", str]:
        """Create Settings with validation."""
        level = validate_log_level(log_level)
        if isinstance(level, Failure):
            return level

        fmt = validate_log_format(log_format)
        if isinstance(fmt, Failure):
            return fmt

        return Success(
            cls(
                log_level=level.unwrap(),
                log_captured_failures=log_captured_failures,
                log_format=fmt.unwrap(),
            )
        )

    @property
    def level_number(self) -> int:
        """Numeric logging level for this configuration."""
        return logging.getLevelNamesMapping()[self.log_level]


# Environment variable parsing
def parse_env_var(key: str, default: str | None = None) -> str | None:
    """Parse environment variable with optional default."""
    return os.environ.get(key, default)


def parse_bool_env(key: str, default: bool = False) -> Result[bool, str]:
    """Parse boolean environment variable."""
    value = parse_env_var(key)
    if value is None or value.strip() == "":
        return Success(default)
    normalized = value.strip().lower()
    if normalized in ("true", "1", "yes", "on"):
        return Success(True)
    if normalized in ("false", "0", "no", "off"):
        return Success(False)
    return Failure(f"Invalid boolean for {key}: {value}")


def _for_setting[T](key: str, result: Result[T, str]) -> Result[T, SettingError]:
    return result.map_failure(lambda message: SettingError(key, message))


def build_settings_from_env() -> Result[Settings, SettingError]:
    """Build settings from environment variables."""
    log_captured = _for_setting(
        LOG_CAPTURED_FAILURES_ENV, parse_bool_env(LOG_CAPTURED_FAILURES_ENV, False)
    )
    if isinstance(log_captured, Failure):
        return log_captured

    log_level = _for_setting(
        LOG_LEVEL_ENV, validate_log_level(parse_env_var(LOG_LEVEL_ENV, "WARNING"))
    )
    if isinstance(log_level, Failure):
        return log_level

    log_format = _for_setting(
        LOG_FORMAT_ENV,
        validate_log_format(parse_env_var(LOG_FORMAT_ENV, DEFAULT_LOG_FORMAT)),
    )
    if isinstance(log_format, Failure):
        return log_format

    return Success(
        Settings(
            log_level=log_level.unwrap(),
            log_captured_failures=log_captured.unwrap(),
            log_format=log_format.unwrap(),
        )
    )


def captured_failure_logging_enabled() -> bool:
    """
    Whether the settle adapters should log captured exceptions.

    Reads the flag directly so an invalid value elsewhere in the environment
    never changes what the settle boundary returns. An invalid value for the
    flag itself counts as disabled.
    """
    return parse_bool_env(LOG_CAPTURED_FAILURES_ENV, False).unwrap_or(False)


def load_settings(
    env_file: str | Path | None = None,
) -> Result[Settings, SettingError]:
    """
    Load settings from a ``.env`` file and the process environment.

    Variables already present in the environment take precedence over the
    file's values.

    Args:
        env_file: Path to a dotenv file. When omitted, python-dotenv searches
            for a ``.env`` file starting from the current working directory.

    Returns:
        Success with the validated settings, or Failure naming the bad variable
    """
    if env_file is not None:
        load_dotenv(env_file, override=False)
    else:
        load_dotenv(override=False)
    return build_settings_from_env()


_settings: Settings | None = None


def get_settings() -> Settings:
    """
    Get the cached settings, building them from the environment on first use.

    Raises:
        ConfigurationError: If the environment holds invalid values
    """
    global _settings
    if _settings is None:
        result = build_settings_from_env()
        if result.is_failure():
            error = result.unwrap_failure()
            raise ConfigurationError(str(error), setting_name=error.setting_name)
        _settings = result.unwrap()
    return _settings


def reset_settings() -> None:
    """Clear the cached settings (useful for testing)."""
    global _settings
    _settings = None


__all__ = [
    "DEFAULT_LOG_FORMAT",
    "LOG_CAPTURED_FAILURES_ENV",
    "LOG_FORMAT_ENV",
    "LOG_LEVEL_ENV",
    "VALID_LOG_LEVELS",
    "SettingError",
    "Settings",
    "build_settings_from_env",
    "captured_failure_logging_enabled",
    "get_settings",
    "load_settings",
    "parse_bool_env",
    "parse_env_var",
    "reset_settings",
    "validate_log_format",
    "validate_log_level",
]
