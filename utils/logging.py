"""Logging utilities for RecordBuilder.

Every module logs through ``get_logger(__name__)``, which places its logger
under the ``recordbuilder`` namespace. ``setup_logging`` configures only
that namespace, so the application never touches the root logger.

Log records go to stderr: stdout belongs to the interactive prompts.
"""

import logging
import sys
from typing import Optional, TextIO

LOGGER_NAMESPACE = "recordbuilder"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    verbose: bool = False,
    level: Optional[int] = None,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """Configure the application logger.

    Safe to call repeatedly: handlers installed by an earlier call are
    replaced.

    Args:
        verbose: DEBUG if True, otherwise WARNING so a normal session only
            shows prompts
        level: Explicit log level (overrides verbose)
        stream: Destination stream (defaults to stderr)

    Returns:
        The configured namespace logger
    """
    if level is None:
        level = logging.DEBUG if verbose else logging.WARNING

    app_logger = logging.getLogger(LOGGER_NAMESPACE)
    for handler in list(app_logger.handlers):
        app_logger.removeHandler(handler)
        handler.close()

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    app_logger.addHandler(handler)
    app_logger.setLevel(level)
    app_logger.propagate = False
    return app_logger


def get_logger(name: str) -> logging.Logger:
    """Logger for a module, nested under the application namespace."""
    if name == LOGGER_NAMESPACE or name.startswith(f"{LOGGER_NAMESPACE}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAMESPACE}.{name}")
