"""Domain-specific exceptions for the load balancer manager.

This module defines the exception hierarchy used across the manager. Every
error carries a human-readable message, a machine-readable error code and a
details dictionary so that callers can redisplay the failure together with
the input that caused it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from lb_manager.domain.validation import FieldError


class LBManagerError(Exception):
    """Base exception for all load balancer manager errors."""

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize the exception.

        Args:
            message: Human-readable error message
            error_code: Machine-readable error code for programmatic handling
            details: Additional error context
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


class DomainError(LBManagerError):
    """Base class for domain-layer errors."""

    pass


class ValidationError(DomainError):
    """Raised when input validation fails.

    Carries every field-level failure that was found, not only the first one,
    along with the command that was submitted so it can be redisplayed.
    """

    def __init__(
        self,
        message: str,
        field: str | None = None,
        field_errors: list[FieldError] | None = None,
        command: Any | None = None,
        **kwargs: Any,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Validation error message
            field: Single field that failed validation
            field_errors: Collected field-level failures
            command: Original command whose validation failed
            **kwargs: Additional error details
        """
        details = kwargs.pop("details", {})
        if field:
            details["field"] = field
        self.field_errors: list[FieldError] = list(field_errors or [])
        if self.field_errors:
            details["fields"] = sorted({error.field for error in self.field_errors})
        super().__init__(message, error_code="VALIDATION_ERROR", details=details)
        self.command = command


class NotFoundError(DomainError):
    """Raised when a named resource does not exist."""

    def __init__(self, resource_type: str, resource_id: str, **kwargs: Any) -> None:
        """
        Initialize not found error.

        Args:
            resource_type: Type of resource (e.g., "Load Balancer")
            resource_id: Identifier of the missing resource
            **kwargs: Additional error details
        """
        message = f"{resource_type} '{resource_id}' not found"
        details = {
            "resource_type": resource_type,
            "resource_id": resource_id,
            **kwargs.pop("details", {}),
        }
        super().__init__(message, error_code="NOT_FOUND", details=details)
        self.resource_type = resource_type
        self.resource_id = resource_id


class ApplicationError(LBManagerError):
    """Base class for application-layer errors."""

    pass


class LoadBalancerOperationError(ApplicationError):
    """Raised when an upstream call for a load balancer operation fails.

    The original command is retained so the operator can resubmit it
    without retyping anything.
    """

    operation = "operate on"
    default_error_code = "LOAD_BALANCER_OPERATION_ERROR"

    def __init__(
        self,
        load_balancer_name: str,
        upstream_message: str,
        command: Any | None = None,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        """
        Initialize load balancer operation error.

        Args:
            load_balancer_name: Name of the affected load balancer
            upstream_message: Message reported by the upstream service
            command: Original command, kept for resubmission
            message: Override for the generated message
            **kwargs: Additional error details
        """
        if message is None:
            message = f"Could not {self.operation} Load Balancer '{load_balancer_name}': "
            message += upstream_message
        details = {
            "load_balancer_name": load_balancer_name,
            "operation": self.operation,
            "upstream_message": upstream_message,
            **kwargs.pop("details", {}),
        }
        super().__init__(
            message,
            error_code=kwargs.pop("error_code", self.default_error_code),
            details=details,
        )
        self.load_balancer_name = load_balancer_name
        self.upstream_message = upstream_message
        self.command = command


class CreateError(LoadBalancerOperationError):
    """Raised when the cloud rejects a load balancer creation."""

    operation = "create"
    default_error_code = "CREATE_ERROR"


class HealthCheckNotConfiguredError(CreateError):
    """Raised when a load balancer was created but its health check was not set.

    The load balancer exists, so callers should direct the operator to it
    rather than back to the creation form.
    """

    default_error_code = "HEALTH_CHECK_NOT_CONFIGURED"

    def __init__(
        self,
        load_balancer_name: str,
        upstream_message: str,
        command: Any | None = None,
        **kwargs: Any,
    ) -> None:
        message = (
            f"Load Balancer '{load_balancer_name}' has been created but its health check "
            f"could not be configured: {upstream_message}"
        )
        details = {"resource_created": True, **kwargs.pop("details", {})}
        super().__init__(
            load_balancer_name,
            upstream_message,
            command=command,
            message=message,
            details=details,
            **kwargs,
        )


class UpdateError(LoadBalancerOperationError):
    """Raised when every attempted part of an update failed."""

    operation = "update"
    default_error_code = "UPDATE_ERROR"

    def __init__(
        self,
        load_balancer_name: str,
        upstream_message: str,
        command: Any | None = None,
        result: Any | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(load_balancer_name, upstream_message, command=command, **kwargs)
        self.result = result


class DeleteError(LoadBalancerOperationError):
    """Raised when a load balancer could not be deleted.

    The resource is assumed to still exist.
    """

    operation = "delete"
    default_error_code = "DELETE_ERROR"

    def __init__(
        self,
        load_balancer_name: str,
        upstream_message: str,
        command: Any | None = None,
        **kwargs: Any,
    ) -> None:
        details = {"resource_exists": True, **kwargs.pop("details", {})}
        super().__init__(
            load_balancer_name, upstream_message, command=command, details=details, **kwargs
        )


class ListenerError(LoadBalancerOperationError):
    """Raised when adding or removing a listener fails upstream."""

    operation = "change listeners on"
    default_error_code = "LISTENER_ERROR"


class PartialFailureError(ApplicationError):
    """Raised when an update applied some changes and failed others.

    Nothing is rolled back. The attached result names every sub-operation and
    whether it succeeded.
    """

    def __init__(self, load_balancer_name: str, result: Any, **kwargs: Any) -> None:
        """
        Initialize partial failure error.

        Args:
            load_balancer_name: Name of the load balancer being updated
            result: UpdateResult describing each sub-operation outcome
            **kwargs: Additional error details
        """
        failed = [outcome.operation.value for outcome in result.outcomes if not outcome.success]
        succeeded = [outcome.operation.value for outcome in result.outcomes if outcome.success]
        message = (
            f"Load Balancer '{load_balancer_name}' was only partially updated: {result.message}"
        )
        details = {
            "load_balancer_name": load_balancer_name,
            "failed_operations": failed,
            "succeeded_operations": succeeded,
            **kwargs.pop("details", {}),
        }
        super().__init__(message, error_code="PARTIAL_FAILURE", details=details)
        self.load_balancer_name = load_balancer_name
        self.result = result

    @property
    def failed_operations(self) -> list[str]:
        """Names of the sub-operations that failed."""
        return list(self.details["failed_operations"])


class InfrastructureError(LBManagerError):
    """Base class for infrastructure-layer errors."""

    pass


class CloudServiceError(InfrastructureError):
    """Raised by cloud client adapters when an API call is rejected."""

    def __init__(
        self, operation: str, reason: str, error_type: str | None = None, **kwargs: Any
    ) -> None:
        """
        Initialize cloud service error.

        Args:
            operation: Cloud API operation that failed
            reason: Failure reason reported by the service
            error_type: Service-specific error type, if any
            **kwargs: Additional error details
        """
        message = f"{operation} failed: {reason}"
        details = {
            "operation": operation,
            "reason": reason,
            "error_type": error_type,
            **kwargs.pop("details", {}),
        }
        super().__init__(message, error_code="CLOUD_SERVICE_ERROR", details=details)
        self.operation = operation
        self.reason = reason


class ConfigurationError(InfrastructureError):
    """Raised when configuration is invalid or missing."""

    def __init__(self, config_key: str, reason: str, **kwargs: Any) -> None:
        """
        Initialize configuration error.

        Args:
            config_key: Configuration key that has issues
            reason: Reason for configuration error
            **kwargs: Additional error details
        """
        message = f"Configuration error for '{config_key}': {reason}"
        details = {
            "config_key": config_key,
            "reason": reason,
            **kwargs.pop("details", {}),
        }
        super().__init__(message, error_code="CONFIGURATION_ERROR", details=details)
