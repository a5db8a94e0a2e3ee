"""Structured logging for guarded open operations."""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Any
from uuid import UUID

import structlog


class GuardLogger:
    """Structured logger for open guard decisions with configurable verbosity."""

    def __init__(
        self,
        log_level: str = "INFO",
        enable_console: bool = True,
        log_file: Path | None = None,
        run_id: UUID | None = None,
    ):
        """Initialize guard logger.

        Args:
            log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
            enable_console: Whether to log to console
            log_file: Optional file path for log output
            run_id: Optional run ID for correlation
        """
        self.run_id = run_id
        self.log_file = log_file
        self._configure_logging(log_level, enable_console, log_file)
        self.logger = structlog.get_logger("openguard")

    def _configure_logging(
        self, log_level: str, enable_console: bool, log_file: Path | None
    ) -> None:
        """Configure structlog with processors and outputs."""
        level = getattr(logging, log_level.upper())

        handlers: list[logging.Handler] = []
        if enable_console:
            handlers.append(logging.StreamHandler(sys.stdout))
        if log_file:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(str(log_file))
            file_handler.setLevel(level)
            handlers.append(file_handler)

        stdlib_logger = logging.getLogger("openguard")
        stdlib_logger.setLevel(level)
        for handler in list(stdlib_logger.handlers):
            stdlib_logger.removeHandler(handler)
            handler.close()
        for handler in handlers:
            handler.setFormatter(logging.Formatter("%(message)s"))
            stdlib_logger.addHandler(handler)
        if not handlers:
            stdlib_logger.addHandler(logging.NullHandler())
        stdlib_logger.propagate = False

        processors = [
            structlog.stdlib.filter_by_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            self._add_run_id,
            # Drop empty fields
            lambda _, __, event_dict: {
                k: v for k, v in event_dict.items() if v is not None
            },
        ]

        if log_level.upper() == "DEBUG":
            processors.append(
                structlog.processors.CallsiteParameterAdder(
                    parameters=[
                        structlog.processors.CallsiteParameter.FUNC_NAME,
                        structlog.processors.CallsiteParameter.LINENO,
                    ]
                )
            )

        if enable_console:
            processors.append(structlog.dev.ConsoleRenderer(colors=False))
        else:
            processors.append(structlog.processors.JSONRenderer())

        structlog.configure(
            processors=processors,
            context_class=dict,
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=False,
        )

    def _add_run_id(
        self, logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        """Add run_id to log events if available."""
        if self.run_id:
            event_dict["run_id"] = str(self.run_id)
        return event_dict

    def open_rejected(self, target: Any, reason: str, error: str) -> None:
        """Log a target refused by the guard."""
        self.logger.warning(
            "Open rejected",
            operation="open",
            target=repr(target),
            reason=reason,
            error=error,
            status="blocked",
        )

    def open_delegated(
        self, target: str, option_count: int, has_callback: bool
    ) -> None:
        """Log a target handed over to the file opener."""
        self.logger.debug(
            "Open delegated",
            operation="open",
            target=target,
            option_count=option_count,
            has_callback=has_callback,
            status="allowed",
        )

    def open_failed(self, target: str, error: Exception) -> None:
        """Log an I/O failure reported by a caller of the guard."""
        self.logger.error(
            "Open failed",
            operation="open",
            target=target,
            error_type=type(error).__name__,
            error_message=str(error),
            status="error",
        )

    def error(
        self, message: str, error: Exception = None, context: dict[str, Any] = None
    ) -> None:
        """Log errors with context."""
        error_info = {}
        if error:
            error_info = {
                "error_type": type(error).__name__,
                "error_message": str(error),
            }

        self.logger.error(
            message, error_info=error_info, context=context or {}, status="error"
        )

    def debug(self, message: str, **kwargs) -> None:
        """Log debug information."""
        self.logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs) -> None:
        """Log info level message."""
        self.logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs) -> None:
        """Log warning message."""
        self.logger.warning(message, **kwargs)


class LoggingContextManager:
    """Context manager that logs start, completion and failure of an operation."""

    def __init__(self, logger: GuardLogger, operation: str, **kwargs):
        """Initialize context manager.

        Args:
            logger: Guard logger instance
            operation: Operation name for logging
            **kwargs: Additional context for logging
        """
        self.logger = logger
        self.operation = operation
        self.context = kwargs
        self.start_time = None

    def __enter__(self):
        self.start_time = datetime.now()
        self.logger.info(f"{self.operation} started", **self.context)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        duration_ms = int((datetime.now() - self.start_time).total_seconds() * 1000)

        if exc_type is None:
            self.logger.info(
                f"{self.operation} completed",
                duration_ms=duration_ms,
                status="success",
                **self.context,
            )
        else:
            context_with_error = {
                **self.context,
                "duration_ms": duration_ms,
                "status": "error",
                "error_type": exc_type.__name__,
                "error_message": str(exc_val),
            }
            self.logger.error(f"{self.operation} failed", context=context_with_error)


def create_guard_logger(
    run_id: UUID = None,
    log_level: str = "INFO",
    enable_console: bool = True,
    log_file: Path | None = None,
) -> GuardLogger:
    """Create and configure a guard logger instance.

    Args:
        run_id: Run ID for correlation
        log_level: Logging level
        enable_console: Whether to enable console output
        log_file: Optional log file path

    Returns:
        Configured guard logger instance
    """
    return GuardLogger(
        log_level=log_level,
        enable_console=enable_console,
        log_file=log_file,
        run_id=run_id,
    )
