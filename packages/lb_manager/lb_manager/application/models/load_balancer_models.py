"""Load balancer Pydantic models for request/response handling.

Commands hold operator input exactly as it was submitted, including missing
or out-of-range values, so that validation can report every problem and the
view layer can redisplay the original input next to the errors.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from lb_manager.domain.entities import HealthCheckSpec, ListenerSpec, LoadBalancer, StackChoice
from lb_manager.domain.enums import SubOperation
from lb_manager.domain.exceptions import (
    LBManagerError,
    LoadBalancerOperationError,
    NotFoundError,
    PartialFailureError,
    UpdateError,
    ValidationError,
)


class HealthCheckInput(BaseModel):
    """Health check fields shared by the create and update forms."""

    target: str | None = Field(
        default=None, description="Health check target, e.g. HTTP:7001/healthcheck"
    )
    interval: int | None = Field(default=None, description="Seconds between health checks")
    timeout: int | None = Field(default=None, description="Health check timeout in seconds")
    unhealthy: int | None = Field(default=None, description="Unhealthy threshold")
    healthy: int | None = Field(default=None, description="Healthy threshold")

    def to_health_check(self) -> HealthCheckSpec:
        """Build the health check spec. Only valid after validation passed."""
        return HealthCheckSpec(
            target=self.target or "",
            interval=self.interval if self.interval is not None else 0,
            timeout=self.timeout if self.timeout is not None else 0,
            unhealthy_threshold=self.unhealthy if self.unhealthy is not None else 0,
            healthy_threshold=self.healthy if self.healthy is not None else 0,
        )


class CreateLoadBalancerCommand(HealthCheckInput):
    """Request to create a load balancer."""

    app_name: str | None = Field(default=None, description="Registered application name")
    stack: str | None = Field(default=None, description="Existing stack")
    new_stack: str | None = Field(default=None, description="Newly typed stack")
    detail: str | None = Field(default=None, description="Free-text detail qualifier")
    selected_zones: list[str] = Field(
        default_factory=list, description="Availability zones to attach"
    )

    protocol1: str | None = Field(default=None, description="Primary listener protocol")
    lb_port1: int | None = Field(default=None, description="Primary load balancer port")
    instance_port1: int | None = Field(default=None, description="Primary instance port")

    protocol2: str | None = Field(default=None, description="Secondary listener protocol")
    lb_port2: int | None = Field(default=None, description="Secondary load balancer port")
    instance_port2: int | None = Field(default=None, description="Secondary instance port")

    model_config = {
        "json_schema_extra": {
            "example": {
                "app_name": "helloworld",
                "stack": "test",
                "detail": "frontend",
                "selected_zones": ["us-east-1a", "us-east-1c"],
                "protocol1": "HTTP",
                "lb_port1": 80,
                "instance_port1": 7001,
                "target": "HTTP:7001/healthcheck",
                "interval": 10,
                "timeout": 5,
                "unhealthy": 2,
                "healthy": 10,
            }
        }
    }

    @property
    def stack_choice(self) -> StackChoice:
        """The stack component as a single tagged value.

        Raises:
            ValueError: If both stack and new_stack are set
        """
        return StackChoice.from_fields(self.stack, self.new_stack)

    @property
    def has_secondary_listener(self) -> bool:
        """Whether a second listener was requested."""
        return bool(self.protocol2)

    def listeners(self) -> list[ListenerSpec]:
        """Build the listener specs. Only valid after validation passed."""
        listeners = [
            ListenerSpec(
                protocol=self.protocol1 or "",
                load_balancer_port=self.lb_port1 or 0,
                instance_port=self.instance_port1 or 0,
            )
        ]
        if self.has_secondary_listener:
            listeners.append(
                ListenerSpec(
                    protocol=self.protocol2 or "",
                    load_balancer_port=self.lb_port2 or 0,
                    instance_port=self.instance_port2 or 0,
                )
            )
        return listeners


class UpdateLoadBalancerCommand(HealthCheckInput):
    """Request to reconcile a load balancer's zones and health check."""

    name: str = Field(..., description="Load balancer name")
    selected_zones: list[str] = Field(
        default_factory=list, description="Desired availability zones"
    )


class AddListenerCommand(BaseModel):
    """Request to add a listener to a load balancer."""

    name: str | None = Field(default=None, description="Load balancer name")
    protocol: str | None = Field(default=None, description="Listener protocol")
    lb_port: int | None = Field(default=None, description="Load balancer port")
    instance_port: int | None = Field(default=None, description="Instance port")

    def to_listener(self) -> ListenerSpec:
        """Build the listener spec. Only valid after validation passed."""
        return ListenerSpec(
            protocol=self.protocol or "",
            load_balancer_port=self.lb_port or 0,
            instance_port=self.instance_port or 0,
        )


class RemoveListenerCommand(BaseModel):
    """Request to remove the listener on a load balancer port."""

    name: str | None = Field(default=None, description="Load balancer name")
    lb_port: int | None = Field(default=None, description="Load balancer port")


class FieldErrorInfo(BaseModel):
    """One field-level validation failure."""

    field: str = Field(..., description="Offending input field")
    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable message")


class OperationResult(BaseModel):
    """Outcome of a create, update, delete or listener operation."""

    success: bool = Field(..., description="Whether the operation fully succeeded")
    resource_name: str | None = Field(default=None, description="Load balancer name")
    message: str = Field(default="", description="Operator-facing summary")
    field_errors: list[FieldErrorInfo] = Field(
        default_factory=list, description="Validation failures, if any"
    )
    error_code: str | None = Field(default=None, description="Error code when unsuccessful")

    @classmethod
    def from_error(cls, error: LBManagerError) -> OperationResult:
        """Convert an orchestrator error into a presentation-facing result."""
        if isinstance(error, (PartialFailureError, UpdateError)) and error.result is not None:
            return error.result

        resource_name: str | None = None
        field_errors: list[FieldErrorInfo] = []
        if isinstance(error, ValidationError):
            field_errors = [FieldErrorInfo(**fe.to_dict()) for fe in error.field_errors]
            resource_name = getattr(error.command, "name", None)
        elif isinstance(error, LoadBalancerOperationError):
            resource_name = error.load_balancer_name
        elif isinstance(error, NotFoundError):
            resource_name = error.resource_id

        return cls(
            success=False,
            resource_name=resource_name,
            message=error.message,
            field_errors=field_errors,
            error_code=error.error_code,
        )


class SubOperationOutcome(BaseModel):
    """Outcome of one independent step of an update."""

    operation: SubOperation = Field(..., description="Step that was attempted")
    success: bool = Field(..., description="Whether the step succeeded")
    message: str = Field(..., description="Operator-facing description")
    zones: list[str] = Field(default_factory=list, description="Zones the step targeted")
    field_errors: list[FieldErrorInfo] = Field(
        default_factory=list, description="Validation failures that prevented the step"
    )


class UpdateResult(OperationResult):
    """Aggregated outcome of a load balancer update."""

    outcomes: list[SubOperationOutcome] = Field(
        default_factory=list, description="Each attempted step, in order"
    )
    zones_added: list[str] = Field(default_factory=list, description="Zones attached")
    zones_removed: list[str] = Field(default_factory=list, description="Zones detached")
    health_check_updated: bool = Field(default=False, description="Health check replaced")

    @property
    def failed_operations(self) -> list[SubOperation]:
        """Steps that failed, in attempt order."""
        return [outcome.operation for outcome in self.outcomes if not outcome.success]

    @property
    def succeeded_operations(self) -> list[SubOperation]:
        """Steps that succeeded, in attempt order."""
        return [outcome.operation for outcome in self.outcomes if outcome.success]


class CreateOptions(BaseModel):
    """Choices offered on the create form."""

    applications: list[str] = Field(default_factory=list, description="Eligible applications")
    stacks: list[str] = Field(default_factory=list, description="Existing stacks")
    zones: list[str] = Field(default_factory=list, description="Available zones")


class EditOptions(BaseModel):
    """State and choices shown on the edit form."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    load_balancer: LoadBalancer = Field(..., description="Current load balancer state")
    zones: list[str] = Field(default_factory=list, description="Available zones")

    def selected(self, zone: str) -> bool:
        """Whether a zone is currently attached."""
        return zone in self.load_balancer.zones

