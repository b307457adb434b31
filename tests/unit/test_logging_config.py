"""Tests for logging setup."""

from __future__ import annotations

import logging

import pytest

from simt.core.logging_config import LOG_FORMAT, configure_logging


@pytest.fixture
def simt_logger():
    logger = logging.getLogger("simt")
    saved_handlers, saved_level = logger.handlers[:], logger.level
    logger.handlers.clear()
    yield logger
    logger.handlers[:] = saved_handlers
    logger.setLevel(saved_level)


def test_adds_single_stream_handler(simt_logger):
    configure_logging("debug")
    assert simt_logger.level == logging.DEBUG
    assert len(simt_logger.handlers) == 1
    assert simt_logger.handlers[0].formatter._fmt == LOG_FORMAT


def test_repeated_setup_is_idempotent(simt_logger):
    configure_logging()
    configure_logging("WARNING")
    assert len(simt_logger.handlers) == 1
    assert simt_logger.level == logging.WARNING
