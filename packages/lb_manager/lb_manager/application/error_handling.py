"""Error handling utilities for the application layer.

Cloud calls are never retried here. A failed call is recorded and reported
to the operator, who decides whether to resubmit.
"""

from __future__ import annotations

from lb_manager.application.models import FieldErrorInfo, SubOperationOutcome
from lb_manager.domain.enums import SubOperation
from lb_manager.infrastructure.logging import get_logger

logger = get_logger(__name__)


def upstream_message(error: BaseException) -> str:
    """Extract the message to show the operator for an upstream failure."""
    return getattr(error, "message", None) or str(error) or type(error).__name__


class OutcomeAggregator:
    """
    Collect the outcomes of independent sub-operations.

    Example:
        aggregator = OutcomeAggregator("helloworld-test")

        try:
            await cloud.add_zones(name, zones)
            aggregator.add_success(SubOperation.ADD_ZONES, "Added zone us-east-1c.", zones)
        except Exception as e:
            aggregator.add_failure(SubOperation.ADD_ZONES, f"Failed: {e}", zones, error=e)

        if aggregator.has_failures():
            logger.error(aggregator.get_summary())
    """

    def __init__(self, load_balancer_name: str) -> None:
        """Initialize outcome aggregator."""
        self.load_balancer_name = load_balancer_name
        self._outcomes: list[SubOperationOutcome] = []

    def add_success(
        self, operation: SubOperation, message: str, zones: list[str] | None = None
    ) -> None:
        """Record a sub-operation that succeeded."""
        self._outcomes.append(
            SubOperationOutcome(
                operation=operation, success=True, message=message, zones=zones or []
            )
        )

    def add_failure(
        self,
        operation: SubOperation,
        message: str,
        zones: list[str] | None = None,
        error: BaseException | None = None,
        field_errors: list[FieldErrorInfo] | None = None,
    ) -> None:
        """Record a sub-operation that failed."""
        logger.error(
            "Load balancer sub-operation failed",
            exc_info=error,
            extra={
                "load_balancer_name": self.load_balancer_name,
                "operation": operation.value,
                "zones": zones or [],
            },
        )
        self._outcomes.append(
            SubOperationOutcome(
                operation=operation,
                success=False,
                message=message,
                zones=zones or [],
                field_errors=field_errors or [],
            )
        )

    def has_failures(self) -> bool:
        """Check if any sub-operation failed."""
        return any(not outcome.success for outcome in self._outcomes)

    def has_successes(self) -> bool:
        """Check if any sub-operation succeeded."""
        return any(outcome.success for outcome in self._outcomes)

    def succeeded(self, operation: SubOperation) -> bool:
        """Check whether a specific sub-operation was recorded as successful."""
        return any(o.operation is operation and o.success for o in self._outcomes)

    @property
    def outcomes(self) -> list[SubOperationOutcome]:
        """Get all recorded outcomes in the order they happened."""
        return list(self._outcomes)

    def get_summary(self) -> str:
        """Join every outcome message into one operator-facing message."""
        return " ".join(outcome.message for outcome in self._outcomes)
