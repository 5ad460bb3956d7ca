"""Unit tests for the load balancer manager exception hierarchy."""

from __future__ import annotations

from lb_manager.application.models import SubOperationOutcome, UpdateResult
from lb_manager.domain.enums import SubOperation
from lb_manager.domain.exceptions import (
    ApplicationError,
    CloudServiceError,
    ConfigurationError,
    CreateError,
    DeleteError,
    DomainError,
    HealthCheckNotConfiguredError,
    InfrastructureError,
    LBManagerError,
    ListenerError,
    LoadBalancerOperationError,
    NotFoundError,
    PartialFailureError,
    UpdateError,
    ValidationError,
)
from lb_manager.domain.validation import FieldError


class TestBaseException:
    """Tests for LBManagerError."""

    def test_defaults(self) -> None:
        """Test error code defaults to the class name."""
        error = LBManagerError("boom")
        assert str(error) == "boom"
        assert error.message == "boom"
        assert error.error_code == "LBManagerError"
        assert error.details == {}

    def test_custom_code_and_details(self) -> None:
        error = LBManagerError("boom", error_code="X", details={"key": "value"})
        assert error.error_code == "X"
        assert error.details == {"key": "value"}

    def test_hierarchy(self) -> None:
        assert issubclass(DomainError, LBManagerError)
        assert issubclass(ApplicationError, LBManagerError)
        assert issubclass(InfrastructureError, LBManagerError)
        assert issubclass(ValidationError, DomainError)
        assert issubclass(NotFoundError, DomainError)
        assert issubclass(CreateError, LoadBalancerOperationError)
        assert issubclass(HealthCheckNotConfiguredError, CreateError)
        assert issubclass(PartialFailureError, ApplicationError)
        assert issubclass(CloudServiceError, InfrastructureError)


class TestValidationError:
    """Tests for ValidationError."""

    def test_single_field(self) -> None:
        error = ValidationError("bad", field="app_name")
        assert error.error_code == "VALIDATION_ERROR"
        assert error.details == {"field": "app_name"}
        assert error.field_errors == []

    def test_field_errors(self) -> None:
        """Test collected field names are listed in the details."""
        errors = [FieldError("stack", "c", "m"), FieldError("detail", "c", "m")]
        error = ValidationError("bad", field_errors=errors, command="cmd")

        assert error.field_errors == errors
        assert error.details["fields"] == ["detail", "stack"]
        assert error.command == "cmd"


class TestNotFoundError:
    def test_message_and_details(self) -> None:
        error = NotFoundError("Load Balancer", "helloworld-test")
        assert error.message == "Load Balancer 'helloworld-test' not found"
        assert error.error_code == "NOT_FOUND"
        assert error.resource_id == "helloworld-test"
        assert error.details["resource_type"] == "Load Balancer"


class TestOperationErrors:
    """Tests for the upstream operation errors."""

    def test_create_error(self) -> None:
        """Test the generated message names the load balancer and upstream reason."""
        command = object()
        error = CreateError("helloworld-test", "quota exceeded", command=command)

        assert error.message == "Could not create Load Balancer 'helloworld-test': quota exceeded"
        assert error.error_code == "CREATE_ERROR"
        assert error.command is command
        assert error.details["upstream_message"] == "quota exceeded"

    def test_health_check_not_configured(self) -> None:
        """Test the error states the load balancer was created."""
        error = HealthCheckNotConfiguredError("helloworld-test", "throttled")

        assert error.error_code == "HEALTH_CHECK_NOT_CONFIGURED"
        assert error.details["resource_created"] is True
        assert "has been created" in error.message
        assert error.message.endswith("throttled")

    def test_delete_error(self) -> None:
        error = DeleteError("helloworld-test", "in use")
        assert error.error_code == "DELETE_ERROR"
        assert error.details["resource_exists"] is True

    def test_listener_error_message_override(self) -> None:
        error = ListenerError("lb", "duplicate", message="Could not add listener: duplicate")
        assert error.message == "Could not add listener: duplicate"
        assert error.error_code == "LISTENER_ERROR"

    def test_update_error_keeps_result(self) -> None:
        result = UpdateResult(success=False, resource_name="lb")
        error = UpdateError("lb", "everything failed", result=result)
        assert error.result is result
        assert error.error_code == "UPDATE_ERROR"


class TestPartialFailureError:
    def test_operations_are_listed(self) -> None:
        """Test failed and succeeded sub-operations are named."""
        result = UpdateResult(
            success=False,
            resource_name="lb",
            message="Added zone us-east-1c to load balancer. Failed to update health check.",
            outcomes=[
                SubOperationOutcome(
                    operation=SubOperation.ADD_ZONES, success=True, message="added"
                ),
                SubOperationOutcome(
                    operation=SubOperation.CONFIGURE_HEALTH_CHECK, success=False, message="x"
                ),
            ],
        )

        error = PartialFailureError("lb", result)

        assert error.error_code == "PARTIAL_FAILURE"
        assert error.failed_operations == ["configure_health_check"]
        assert error.details["succeeded_operations"] == ["add_zones"]
        assert error.result is result
        assert "partially updated" in error.message


class TestInfrastructureErrors:
    def test_cloud_service_error(self) -> None:
        error = CloudServiceError("CreateLoadBalancer", "denied", error_type="AccessDenied")
        assert error.message == "CreateLoadBalancer failed: denied"
        assert error.details["error_type"] == "AccessDenied"
        assert error.reason == "denied"

    def test_configuration_error(self) -> None:
        error = ConfigurationError("cloud.region", "empty")
        assert error.message == "Configuration error for 'cloud.region': empty"
        assert error.error_code == "CONFIGURATION_ERROR"
