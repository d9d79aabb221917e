"""
Unit tests for the logging helper.
"""

import logging
import sys

from storage_proof_toolkit.shared.logging import get_logger


class TestGetLogger:
    def test_handler_writes_to_stderr(self):
        logger = get_logger("storage_proof_toolkit.tests.stderr")

        assert len(logger.handlers) == 1
        assert logger.handlers[0].stream is sys.stderr

    def test_reuses_existing_handler(self):
        first = get_logger("storage_proof_toolkit.tests.reuse")
        second = get_logger("storage_proof_toolkit.tests.reuse")

        assert first is second
        assert len(second.handlers) == 1

    def test_level_override(self, monkeypatch):
        monkeypatch.setenv("SPP_LOG_LEVEL", "debug")

        logger = get_logger("storage_proof_toolkit.tests.level")

        assert logger.level == logging.DEBUG
