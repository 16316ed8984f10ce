"""Logging configuration for gitsparse.

Every module obtains its logger through ``get_logger(__name__)``. Nothing is emitted until
``configure_logging`` installs a handler, which the CLI does once at startup.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gitsparse.schemas import RunConfig

PACKAGE_LOGGER_NAME = "gitsparse"

_LOG_FORMAT = "%(message)s"
_VERBOSE_LOG_FORMAT = "[%(levelname)s] %(message)s"


class _ExtraFormatter(logging.Formatter):
    """Formatter that appends structured ``extra`` fields as ``key=value`` pairs."""

    _RESERVED = frozenset(logging.LogRecord("", 0, "", 0, "", (), None).__dict__) | {"message", "asctime"}

    def format(self, record: logging.LogRecord) -> str:
        base = super().format(record)
        extras = {key: value for key, value in record.__dict__.items() if key not in self._RESERVED}
        if not extras:
            return base
        details = " ".join(f"{key}={value!r}" for key, value in extras.items())
        return f"{base} ({details})"


def get_logger(name: str) -> logging.Logger:
    """Return a logger below the ``gitsparse`` package logger.

    Parameters
    ----------
    name : str
        Usually the ``__name__`` of the calling module.

    Returns
    -------
    logging.Logger
        The logger for ``name``.

    """
    if name != PACKAGE_LOGGER_NAME and not name.startswith(f"{PACKAGE_LOGGER_NAME}."):
        name = f"{PACKAGE_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logging(config: RunConfig) -> None:
    """Send package log records to ``stderr`` at a level chosen by ``config``.

    Progress messages are logged at ``INFO`` and only shown in verbose mode; warnings and
    errors are always shown. Calling this again replaces the previous handler.

    Parameters
    ----------
    config : RunConfig
        The flags for the current run.

    """
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    if config.verbose:
        handler.setFormatter(_ExtraFormatter(_VERBOSE_LOG_FORMAT))
        package_logger.setLevel(logging.INFO)
    else:
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        package_logger.setLevel(logging.WARNING)

    package_logger.addHandler(handler)
