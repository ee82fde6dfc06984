"""
Logging helpers for fluentQL.

The library only ever talks to loggers obtained through :func:`get_logger`,
all of which live under the ``fluentql`` namespace.  Nothing is configured on
import; applications that want console output call :func:`setup_logging`
once at startup.

Example:
    >>> from fluentql.logger import get_logger, setup_logging
    >>>
    >>> setup_logging(log_level='DEBUG')
    >>> logger = get_logger(__name__)
    >>> logger.debug("Assembled statement")
"""

import logging
import sys
from typing import Optional

LOGGER_NAMESPACE = "fluentql"

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_HANDLER_NAME = "fluentql-console"


def get_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """Get a logger instance for the specified module.

    Args:
        name: Logger name (typically __name__ of calling module)
        level: Optional logging level override (DEBUG/INFO/WARNING/ERROR/CRITICAL)

    Returns:
        Logger instance
    """
    logger = logging.getLogger(name)

    if level:
        logger.setLevel(getattr(logging, level.upper()))

    return logger


def setup_logging(
    log_level: str = 'INFO',
    console_output: bool = True,
    fmt: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """Configure the ``fluentql`` logger namespace.

    Safe to call more than once: the console handler is installed a single
    time and later calls only adjust the level and format.

    Args:
        log_level: Logging level (DEBUG/INFO/WARNING/ERROR/CRITICAL)
        console_output: Attach a stderr handler when True
        fmt: Format string for the console handler

    Returns:
        The configured ``fluentql`` logger
    """
    logger = logging.getLogger(LOGGER_NAMESPACE)
    logger.setLevel(getattr(logging, log_level.upper()))

    handler = next(
        (h for h in logger.handlers if h.get_name() == _HANDLER_NAME), None
    )
    if console_output and handler is None:
        handler = logging.StreamHandler(sys.stderr)
        handler.set_name(_HANDLER_NAME)
        logger.addHandler(handler)
    elif not console_output and handler is not None:
        logger.removeHandler(handler)
        handler = None

    if handler is not None:
        handler.setFormatter(logging.Formatter(fmt, datefmt=DEFAULT_DATE_FORMAT))

    return logger
