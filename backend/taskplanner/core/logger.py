"""
Logging helpers.

Modules obtain their logger with ``setup_logger(__name__)``. Everything logs
under the ``taskplanner`` logger, which owns a single stderr handler.
"""

from __future__ import annotations

import logging
import sys

_PACKAGE_LOGGER = "taskplanner"
_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str | int = logging.INFO) -> None:
    """Attach the console handler (once) and set the package log level."""
    root = logging.getLogger(_PACKAGE_LOGGER)
    root.setLevel(level)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(fmt=_FORMAT, datefmt=_DATE_FORMAT))
        root.addHandler(handler)


def setup_logger(name: str) -> logging.Logger:
    """Return a module logger under the package hierarchy."""
    root = logging.getLogger(_PACKAGE_LOGGER)
    if not root.handlers:
        configure_logging()
    return logging.getLogger(name)
