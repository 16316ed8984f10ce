"""Tests for the logging configuration."""

from __future__ import annotations

import logging

import pytest

from gitsparse.schemas import RunConfig
from gitsparse.utils.logging_config import PACKAGE_LOGGER_NAME, configure_logging, get_logger


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("gitsparse", "gitsparse"),
        ("gitsparse.clone", "gitsparse.clone"),
        ("__main__", "gitsparse.__main__"),
    ],
)
def test_get_logger_is_below_package_logger(name: str, expected: str) -> None:
    """Every logger is a child of the package logger."""
    assert get_logger(name).name == expected


@pytest.mark.parametrize(("verbose", "level"), [(True, logging.INFO), (False, logging.WARNING)])
def test_configure_logging_level(*, verbose: bool, level: int) -> None:
    """Verbose runs show progress; quiet runs only show warnings and errors."""
    configure_logging(RunConfig(verbose=verbose))

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    assert package_logger.level == level
    assert len(package_logger.handlers) == 1


def test_configure_logging_replaces_handler() -> None:
    """Configuring twice does not duplicate output."""
    configure_logging(RunConfig(verbose=True))
    configure_logging(RunConfig(verbose=False))

    assert len(logging.getLogger(PACKAGE_LOGGER_NAME).handlers) == 1


def test_verbose_format_includes_extra_fields(capsys: pytest.CaptureFixture[str]) -> None:
    """Structured ``extra`` fields are appended to verbose messages."""
    configure_logging(RunConfig(verbose=True))

    get_logger("gitsparse.test").info("Pulling branch", extra={"branch": "main"})

    assert "[INFO] Pulling branch (branch='main')" in capsys.readouterr().err
