"""Tests for logging setup."""

import logging

import pytest

from utils.logging_config import setup_logging


@pytest.fixture(autouse=True)
def restore_root_logging():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_setup_logging_sets_level_and_single_handler():
    """Test that repeated setup replaces the handler."""
    setup_logging(level="debug")
    setup_logging(level="WARNING")

    root = logging.getLogger()
    assert root.level == logging.WARNING
    assert len(root.handlers) == 1


def test_setup_logging_rejects_unknown_level():
    """Test that a bad level name raises."""
    with pytest.raises(ValueError, match="Unknown log level"):
        setup_logging(level="LOUD")
