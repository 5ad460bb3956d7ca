"""Metrics collection for load balancer operations."""

from __future__ import annotations

from prometheus_client import Counter, Histogram

from lb_manager.domain.enums import OperationType
from lb_manager.infrastructure.logging import get_logger

logger = get_logger(__name__)

operations_total = Counter(
    "lb_manager_operations_total",
    "Total number of load balancer operations by outcome",
    ["operation", "status"],
)

operation_duration = Histogram(
    "lb_manager_operation_duration_seconds",
    "Load balancer operation duration in seconds",
    ["operation"],
    buckets=(0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0),
)

zone_changes_total = Counter(
    "lb_manager_zone_changes_total",
    "Total number of availability zones attached or detached",
    ["direction", "status"],
)


class OperationMetricsCollector:
    """Records prometheus metrics for orchestrator operations."""

    def __init__(self, enabled: bool = True) -> None:
        """Initialize metrics collector.

        Args:
            enabled: When False every record call is a no-op
        """
        self.enabled = enabled

    def record_operation(self, operation: OperationType, status: str, duration: float) -> None:
        """Record the outcome and duration of one operation.

        Args:
            operation: Operation that ran
            status: Outcome label (success, partial_failure, validation_error, ...)
            duration: Elapsed time in seconds
        """
        if not self.enabled:
            return
        operations_total.labels(operation=operation.value, status=status).inc()
        operation_duration.labels(operation=operation.value).observe(duration)
        logger.debug(
            "Recorded operation metric",
            extra={"operation": operation.value, "status": status, "duration": duration},
        )

    def record_zone_changes(self, direction: str, count: int, success: bool) -> None:
        """Record zones attached ("added") or detached ("removed")."""
        if not self.enabled or count <= 0:
            return
        zone_changes_total.labels(
            direction=direction, status="success" if success else "failure"
        ).inc(count)
