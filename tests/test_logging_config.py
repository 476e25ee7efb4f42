"""Tests for singleton logging configuration."""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest

from specaudit.logging_config import (
    _SUPPRESSED_LOGGERS,
    LOG_DATEFMT,
    LOG_FORMAT,
    setup_logging,
)


@pytest.fixture(autouse=True)
def _reset_flag() -> None:
    """Reset the singleton flag before each test."""
    import specaudit.logging_config as mod

    mod._configured = False


def test_setup_logging_is_idempotent() -> None:
    with patch("specaudit.logging_config.logging.basicConfig") as mock_bc:
        setup_logging()
        setup_logging()
        mock_bc.assert_called_once()


def test_level_and_format_passed() -> None:
    with patch("specaudit.logging_config.logging.basicConfig") as mock_bc:
        setup_logging("debug")
    kwargs = mock_bc.call_args.kwargs
    assert kwargs["level"] == logging.DEBUG
    assert kwargs["format"] == LOG_FORMAT
    assert kwargs["datefmt"] == LOG_DATEFMT


def test_third_party_loggers_suppressed() -> None:
    with patch("specaudit.logging_config.logging.basicConfig"):
        setup_logging()
    for name in _SUPPRESSED_LOGGERS:
        assert logging.getLogger(name).level == logging.WARNING
