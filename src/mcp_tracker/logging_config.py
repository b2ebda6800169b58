"""Logger setup for mcp-tracker.

Records carry a `context` string (`key=value,...`) so the lines of one
tool call or resource read can be grepped together. The context lives in
a ContextVar, so every asyncio task, and every worker thread started with
`asyncio.to_thread`, sees its own copy.
"""

import contextvars
import logging
import os
import sys
import time
import types
import uuid
from collections.abc import Mapping
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, cast

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] [%(name)s] [%(context)s] %(message)s"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_DIRECTORY = "logs"
MAX_LOG_SIZE = 10 * 1024 * 1024  # 10 MB
LOG_BACKUP_COUNT = 5
NO_CONTEXT = "no-context"


class ContextualLogger(logging.Logger):
    """Logger that stamps each record with the current call's context."""

    def __init__(self, name: str, level: int = 0) -> None:
        super().__init__(name, level)
        self._context: contextvars.ContextVar[dict[str, Any] | None] = (
            contextvars.ContextVar(f"{name}.context", default=None)
        )

    def get_context(self) -> dict[str, Any]:
        """Return a copy of the context visible to the running task."""
        return dict(self._context.get() or {})

    def replace_context(self, context: Mapping[str, Any]) -> None:
        self._context.set(dict(context))

    def set_context(self, **kwargs: Any) -> None:
        """Add or overwrite context keys for the running task."""
        self.replace_context({**self.get_context(), **kwargs})

    def clear_context(self) -> None:
        self._context.set(None)

    def _format_context(self) -> str:
        context = self._context.get()
        if not context:
            return NO_CONTEXT
        return ",".join(f"{key}={value}" for key, value in context.items())

    def _log(
        self,
        level: int,
        msg: object,
        args: tuple[object, ...] | Mapping[str, object],
        exc_info: Any = None,
        extra: Mapping[str, object] | None = None,
        stack_info: bool = False,
        stacklevel: int = 1,
    ) -> None:
        if extra is None or "context" not in extra:
            extra = {**(extra or {}), "context": self._format_context()}
        super()._log(level, msg, args, exc_info, extra, stack_info, stacklevel + 1)


class _ContextDefaultFilter(logging.Filter):
    """Give records from plain loggers a `context` so the format never fails."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "context"):
            record.context = NO_CONTEXT
        return True


class LoggingContextManager:
    """Time one operation and tag the records logged while it runs.

    The context is only attached when the logger is a ContextualLogger; a
    plain logger still gets the start, failure and completion lines.
    """

    def __init__(
        self, logger: logging.Logger, operation: str, **context: Any
    ) -> None:
        self.logger = logger
        self.operation = operation
        self.trace_id = context.get("trace_id") or uuid.uuid4().hex[:8]
        self.context = {**context, "operation": operation, "trace_id": self.trace_id}
        self.start_time = time.time()
        self._saved: dict[str, Any] | None = None

    def __enter__(self) -> "LoggingContextManager":
        if isinstance(self.logger, ContextualLogger):
            self._saved = self.logger.get_context()
            self.logger.set_context(**self.context)

        self.logger.info(f"Operation started: {self.operation}")
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: types.TracebackType | None,
    ) -> None:
        elapsed = time.time() - self.start_time
        if exc_type:
            self.logger.error(
                f"Operation failed: {self.operation} after {elapsed:.3f}s - {exc_val}"
            )
        else:
            self.logger.debug(f"Operation completed: {self.operation} in {elapsed:.3f}s")

        if isinstance(self.logger, ContextualLogger) and self._saved is not None:
            self.logger.replace_context(self._saved)


def setup_logger(
    name: str = "mcp-tracker",
    level: str | None = None,
    log_to_file: bool = False,
    log_dir: str | None = None,
    log_format: str | None = None,
) -> ContextualLogger:
    """
    Configure the named logger and return it.

    Output goes to stderr because stdout belongs to the stdio transport.
    Handlers from an earlier call are closed and replaced.

    Args:
        name: Logger name; children such as `mcp-tracker.jira` inherit it
        level: Level name, falling back to LOG_LEVEL then INFO
        log_to_file: Also write to `<log_dir>/<name>.log`, rotated at 10 MB
        log_dir: Log directory, falling back to LOG_DIR then ./logs
        log_format: Format string, falling back to LOG_FORMAT

    Returns:
        The configured logger
    """
    logging.setLoggerClass(ContextualLogger)
    logger = logging.getLogger(name)

    level_name = (level or os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL)).upper()
    logger.setLevel(getattr(logging, level_name, logging.INFO))

    for old_handler in list(logger.handlers):
        logger.removeHandler(old_handler)
        old_handler.close()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_to_file:
        directory = Path(log_dir or os.getenv("LOG_DIR", DEFAULT_LOG_DIRECTORY))
        directory.mkdir(parents=True, exist_ok=True)
        handlers.append(
            RotatingFileHandler(
                directory / f"{name}.log",
                maxBytes=MAX_LOG_SIZE,
                backupCount=LOG_BACKUP_COUNT,
            )
        )

    formatter = logging.Formatter(log_format or os.getenv("LOG_FORMAT", DEFAULT_FORMAT))
    context_filter = _ContextDefaultFilter()
    for handler in handlers:
        handler.setFormatter(formatter)
        handler.addFilter(context_filter)
        logger.addHandler(handler)

    logger.propagate = False
    return cast(ContextualLogger, logger)


def log_operation(
    logger: logging.Logger, operation: str, **context: Any
) -> LoggingContextManager:
    """Wrap a block in start and completion logging.

    Example:
        with log_operation(logger, "call_tool", tool=name):
            ...
    """
    return LoggingContextManager(logger, operation, **context)
