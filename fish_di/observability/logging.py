"""
Logging utilities for FISH_DI.

Provides loggers that attach per-container context to every record.
"""

import logging
from datetime import datetime
from typing import Any


def get_logging_context(**context: Any) -> dict[str, Any]:
    """
    Build the context attached to a log record.

    Args:
        **context: Additional context (container name, token, etc.)

    Returns:
        Dictionary with a timestamp and the given context
    """
    log_context: dict[str, Any] = {
        "timestamp": datetime.now().isoformat(),
    }
    log_context.update(context)
    return log_context


class ContextualLoggerAdapter(logging.LoggerAdapter):
    """
    Logger adapter that automatically adds context to log records.

    Context given at construction is merged with any ``extra`` passed to an
    individual call, the latter taking precedence.
    """

    def process(self, msg: str, kwargs: dict[str, Any]) -> tuple[str, dict[str, Any]]:
        """Add context to log records."""
        context = get_logging_context(**(self.extra or {}))

        extra = kwargs.get("extra", {})
        if extra:
            context.update(extra)

        kwargs["extra"] = context
        return msg, kwargs


def get_logger(name: str, **context: Any) -> ContextualLoggerAdapter:
    """
    Get a contextual logger.

    Args:
        name: Logger name (typically __name__)
        **context: Context attached to every record (e.g. container="api")

    Returns:
        ContextualLoggerAdapter instance
    """
    base_logger = logging.getLogger(name)
    return ContextualLoggerAdapter(base_logger, context)


def log_operation(
    logger: logging.Logger | logging.LoggerAdapter,
    operation: str,
    level: int = logging.INFO,
    success: bool = True,
    duration_ms: float | None = None,
    **context: Any,
) -> None:
    """
    Log an operation with structured context.

    Args:
        logger: Logger instance
        operation: Operation name
        level: Log level
        success: Whether operation succeeded
        duration_ms: Operation duration in milliseconds
        **context: Additional context
    """
    log_context = get_logging_context(operation=operation, success=success)

    if duration_ms is not None:
        log_context["duration_ms"] = round(duration_ms, 2)

    if context:
        log_context.update(context)

    message = f"Operation: {operation}"
    if not success:
        message = f"Operation failed: {operation}"
    if duration_ms is not None:
        message += f" (duration: {duration_ms:.2f}ms)"

    logger.log(level, message, extra=log_context)
