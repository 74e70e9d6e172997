"""Tests for the logging setup."""

import logging

import pytest


@pytest.fixture
def clean_logger():
    root = logging.getLogger("addressfinder")
    saved = list(root.handlers)
    root.handlers.clear()
    yield root
    for handler in root.handlers:
        handler.close()
    root.handlers[:] = saved


def test_setup_logging_creates_log_file(tmp_path, clean_logger):
    from logging_config import setup_logging
    setup_logging(str(tmp_path))
    logging.getLogger("addressfinder.search").info("hello")
    for handler in clean_logger.handlers:
        handler.flush()
    assert "hello" in (tmp_path / "addressfinder.log").read_text(encoding="utf-8")


def test_setup_logging_is_idempotent(tmp_path, clean_logger):
    from logging_config import setup_logging
    setup_logging(str(tmp_path))
    count = len(clean_logger.handlers)
    setup_logging(str(tmp_path))
    assert len(clean_logger.handlers) == count == 2
