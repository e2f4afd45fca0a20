"""Tests for centralized logging setup."""

from __future__ import annotations

import logging

import pytest

from rosterimport.core.logging_config import setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)


def test_setup_logging_writes_to_file(tmp_path, restore_root_logger):
    log_file = tmp_path / "logs" / "import.log"
    setup_logging("debug", log_file=str(log_file))

    logging.getLogger("rosterimport.test").debug("hello from the wizard")
    for handler in restore_root_logger.handlers:
        handler.flush()

    assert restore_root_logger.level == logging.DEBUG
    assert "hello from the wizard" in log_file.read_text()
    assert logging.getLogger("httpx").level == logging.WARNING
