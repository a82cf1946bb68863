"""
Observability components.

Provides contextual logging and resolution metrics.
"""

from .logging import (
    ContextualLoggerAdapter,
    get_logger,
    get_logging_context,
    log_operation,
)
from .metrics import (
    MetricsCollector,
    OperationMetrics,
    get_metrics_collector,
)

__all__ = [
    # Metrics
    "MetricsCollector",
    "OperationMetrics",
    "get_metrics_collector",
    # Logging
    "ContextualLoggerAdapter",
    "get_logger",
    "get_logging_context",
    "log_operation",
]
