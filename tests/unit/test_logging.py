"""Tests for structured guard logging."""

import json
import logging
from pathlib import Path
from unittest.mock import Mock
from uuid import uuid4

import pytest

from openguard.logging import GuardLogger, LoggingContextManager, create_guard_logger


class TestGuardLogger:
    """Test guard logger functionality."""

    def test_logger_initialization(self, tmp_path):
        """Test basic logger initialization."""
        logger = GuardLogger()
        assert logger.run_id is None
        assert logger.log_file is None

        run_id = uuid4()
        log_file = tmp_path / "guard.log"
        logger_with_params = GuardLogger(
            log_level="DEBUG",
            run_id=run_id,
            log_file=log_file
        )
        assert logger_with_params.run_id == run_id
        assert logger_with_params.log_file == log_file

    def test_create_guard_logger_factory(self):
        """Test logger factory function."""
        run_id = uuid4()
        logger = create_guard_logger(
            run_id=run_id,
            log_level="INFO",
            enable_console=False
        )
        assert logger.run_id == run_id

    def test_guard_logging_methods(self):
        """Guard event methods should not raise."""
        logger = GuardLogger(log_level="DEBUG", enable_console=False)

        logger.open_rejected(42, "not_a_string", "not a string")
        logger.open_rejected("|ls", "pipe", "pipe-based open is not supported on this platform")
        logger.open_delegated("data.txt", 1, False)
        logger.open_failed("missing.txt", FileNotFoundError("missing.txt"))

    def test_generic_logging_methods(self):
        """Generic methods should not raise."""
        logger = GuardLogger(enable_console=False)

        logger.debug("debug message", extra_field="value")
        logger.info("info message", count=1)
        logger.warning("warning message")
        logger.error("error message", error=ValueError("bad"), context={"k": "v"})

    def test_json_output_to_file(self, tmp_path):
        """Without console output, events are written as JSON lines."""
        run_id = uuid4()
        log_file = tmp_path / "logs" / "guard.log"
        logger = GuardLogger(enable_console=False, log_file=log_file, run_id=run_id)

        logger.open_rejected("|ls", "pipe", "pipe-based open is not supported on this platform")
        for handler in logging.getLogger("openguard").handlers:
            handler.flush()

        lines = [line for line in log_file.read_text().splitlines() if line]
        event = json.loads(lines[-1])
        assert event["event"] == "Open rejected"
        assert event["reason"] == "pipe"
        assert event["status"] == "blocked"
        assert event["run_id"] == str(run_id)
        assert event["level"] == "warning"

    def test_debug_filtered_at_info(self, tmp_path):
        """Debug events are dropped at INFO level."""
        log_file = tmp_path / "guard.log"
        logger = GuardLogger(enable_console=False, log_file=log_file)

        logger.open_delegated("data.txt", 0, False)
        for handler in logging.getLogger("openguard").handlers:
            handler.flush()

        assert log_file.read_text() == ""


class TestLoggingContextManager:
    """Test LoggingContextManager."""

    def test_success(self):
        logger = Mock()

        with LoggingContextManager(logger, "read", path="a.txt"):
            pass

        logger.info.assert_any_call("read started", path="a.txt")
        completed = logger.info.call_args_list[-1]
        assert completed.args[0] == "read completed"
        assert completed.kwargs["status"] == "success"

    def test_failure_is_logged_and_reraised(self):
        logger = Mock()

        with pytest.raises(OSError):
            with LoggingContextManager(logger, "read", path="a.txt"):
                raise OSError("disk gone")

        message = logger.error.call_args.args[0]
        context = logger.error.call_args.kwargs["context"]
        assert message == "read failed"
        assert context["error_type"] == "OSError"
        assert context["path"] == "a.txt"
