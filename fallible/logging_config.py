"""
Logging configuration for the fallible logger hierarchy.

The library never configures the root logger. Applications that want to see
fallible's diagnostics call ``setup_logging`` once at startup.
"""

import logging

from .config import Settings, get_settings

PACKAGE_LOGGER = "fallible"
_HANDLER_NAME = "fallible-console"


def setup_logging(settings: Settings | None = None) -> logging.Logger:
    """
    Attach a console handler to the ``fallible`` logger.

    Calling this again replaces the handler installed by a previous call
    instead of adding a second one.

    Args:
        settings: Settings to apply; defaults to ``get_settings()``

    Returns:
        The configured package logger
    """
    settings = settings or get_settings()
    logger = logging.getLogger(PACKAGE_LOGGER)

    for handler in list(logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            logger.removeHandler(handler)
            handler.close()

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(settings.log_format))
    handler.setLevel(settings.level_number)

    logger.addHandler(handler)
    logger.setLevel(settings.level_number)
    return logger


__all__ = ["PACKAGE_LOGGER", "setup_logging"]
