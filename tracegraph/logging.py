"""Package-wide logging setup for tracegraph.

Every module obtains its logger through :func:`get_logger`. Child loggers carry
no handlers of their own; records propagate to the ``tracegraph`` root logger,
which owns a single stream handler installed on first use.
"""

import logging
import sys
from typing import Optional

ROOT_LOGGER_NAME = "tracegraph"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Install the handler on the ``tracegraph`` root logger.

    Subsequent calls are no-ops until :func:`reset_logging` is called.

    Args:
        level: Root logging level.
        format_string: Record format; defaults to ``DEFAULT_FORMAT``.
        handler: Handler to install; defaults to a stdout ``StreamHandler``.
    """
    global _configured

    if _configured:
        return

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level)
    root.handlers.clear()

    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    root.addHandler(handler)

    # pytest's caplog hooks the global root logger
    root.propagate = True

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger that inherits the ``tracegraph`` configuration.

    Args:
        name: Logger name, normally ``__name__`` of the calling module.

    Returns:
        The logger, with its level left to the parent.
    """
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Set the level of the root logger and its handlers."""
    setup_root_logger()
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level)
    for handler in root.handlers:
        handler.setLevel(level)


def enable_debug_logging() -> None:
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Drop the root handler so the next call reconfigures from scratch."""
    global _configured
    _configured = False

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.handlers.clear()
    root.setLevel(logging.NOTSET)


setup_root_logger()
