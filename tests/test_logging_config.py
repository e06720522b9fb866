"""Tests for console logging setup."""

from __future__ import annotations

import logging
import typing as typ

import pytest

from tutorial_pages.logging_config import LOG_FORMAT, configure_logging

if typ.TYPE_CHECKING:
    import collections.abc as cabc


@pytest.fixture
def restore_root_logger() -> cabc.Iterator[logging.Logger]:
    """Restore root handlers and level after each test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def test_installs_single_stream_handler(restore_root_logger: logging.Logger) -> None:
    configure_logging("debug")
    configure_logging("DEBUG")

    assert restore_root_logger.level == logging.DEBUG
    assert len(restore_root_logger.handlers) == 1
    handler = restore_root_logger.handlers[0]
    assert isinstance(handler, logging.StreamHandler)
    assert handler.formatter is not None
    assert handler.formatter._fmt == LOG_FORMAT


def test_unknown_level_falls_back_to_info(
    restore_root_logger: logging.Logger,
) -> None:
    configure_logging("chatty")

    assert restore_root_logger.level == logging.INFO


def test_werkzeug_never_below_info(restore_root_logger: logging.Logger) -> None:
    configure_logging("DEBUG")

    assert logging.getLogger("werkzeug").level == logging.INFO
