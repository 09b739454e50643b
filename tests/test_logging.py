"""Tests for copymind/utils/logging.py."""

import logging

from rich.logging import RichHandler

from copymind.utils.logging import get_logger, setup_logging


class TestSetupLogging:
    """Tests for logger configuration."""

    def test_console_handler_only(self):
        logger = setup_logging("WARNING")

        assert logger.name == "copymind"
        assert logger.level == logging.WARNING
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], RichHandler)

    def test_console_writes_to_stderr(self):
        logger = setup_logging("INFO")

        assert logger.handlers[0].console.stderr is True

    def test_file_handler(self, tmp_path):
        log_file = tmp_path / "logs" / "copymind.log"

        logger = setup_logging("INFO", log_file)
        get_logger("semantic").warning("Semantic similarity check failed")
        for handler in logger.handlers:
            handler.flush()

        assert len(logger.handlers) == 2
        assert "copymind.semantic" in log_file.read_text(encoding="utf-8")

        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()

    def test_repeated_setup_does_not_stack_handlers(self):
        setup_logging("INFO")
        logger = setup_logging("INFO")

        assert len(logger.handlers) == 1


class TestGetLogger:
    """Tests for get_logger()."""

    def test_prefixed_name(self):
        assert get_logger("gate").name == "copymind.gate"

    def test_root_name(self):
        assert get_logger().name == "copymind"
