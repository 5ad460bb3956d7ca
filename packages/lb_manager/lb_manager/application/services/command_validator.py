"""Validation of operator commands.

Every check that needs outside information receives it explicitly: the
application registry is injected and sibling field values are read from the
command being validated. All field errors are collected; within a single
field only the first failing rule is reported.
"""

from __future__ import annotations

from lb_manager.application.models import (
    AddListenerCommand,
    CreateLoadBalancerCommand,
    RemoveListenerCommand,
)
from lb_manager.domain.interfaces import ApplicationRegistry
from lb_manager.domain.services import name_builder
from lb_manager.domain.services.spec_validator import (
    ListenerFields,
    check_port,
    check_required_text,
    validate_health_check_values,
    validate_listener_values,
)
from lb_manager.domain.validation import ValidationResult
from lb_manager.infrastructure.logging import get_logger

logger = get_logger(__name__)

APP_NAME_ILLEGAL_CHAR = "application.name.illegalChar"
APP_NAME_NONEXISTENT = "application.name.nonexistent"
RESERVED_FORMAT = "name.usesReservedFormat"
STACK_ILLEGAL_CHAR = "stack.illegalChar"
STACK_MATCHES_NEW_STACK = "stack.matchesNewStack"
DETAIL_ILLEGAL_CHAR = "detail.illegalChar"
SECOND_LISTENER_PORTS = "listener.secondPortsMissing"
DUPLICATE_LISTENER_PORT = "listener.duplicatePort"

PRIMARY_LISTENER_FIELDS = ListenerFields("protocol1", "lb_port1", "instance_port1")

_RESERVED_MESSAGE = "The name uses a format reserved for versions and labeled variables"


class CommandValidator:
    """Validates create and listener commands before anything is sent upstream."""

    def __init__(
        self,
        application_registry: ApplicationRegistry,
        max_name_length: int = name_builder.NAME_MAX_LENGTH,
    ) -> None:
        """Initialize the command validator.

        Args:
            application_registry: Registry used to confirm application ownership
            max_name_length: Maximum length of a complete load balancer name
        """
        self.application_registry = application_registry
        self.max_name_length = max_name_length

    async def validate_create(self, command: CreateLoadBalancerCommand) -> ValidationResult:
        """Validate every field of a create command.

        Args:
            command: The submitted create command

        Returns:
            ValidationResult with one entry per failing field
        """
        result = ValidationResult()
        await self._validate_app_name(result, command)
        self._validate_stack(result, command)
        self._validate_new_stack(result, command)
        self._validate_detail(result, command)
        self._validate_listeners(result, command)
        result.extend(
            validate_health_check_values(
                command.target,
                command.interval,
                command.timeout,
                command.unhealthy,
                command.healthy,
            )
        )

        if not result.is_valid:
            logger.info(
                "Create command rejected",
                extra={
                    "app_name": command.app_name,
                    "fields": [error.field for error in result.errors],
                },
            )
        return result

    def validate_add_listener(self, command: AddListenerCommand) -> ValidationResult:
        """Validate an add-listener command."""
        result = ValidationResult()
        check_required_text(result, "name", command.name)
        result.extend(
            validate_listener_values(command.protocol, command.lb_port, command.instance_port)
        )
        return result

    def validate_remove_listener(self, command: RemoveListenerCommand) -> ValidationResult:
        """Validate a remove-listener command."""
        result = ValidationResult()
        check_required_text(result, "name", command.name)
        check_port(result, "lb_port", command.lb_port)
        return result

    def validate_name(self, name: str | None) -> ValidationResult:
        """Validate that a load balancer name was supplied."""
        result = ValidationResult()
        check_required_text(result, "name", name)
        return result

    async def _validate_app_name(
        self, result: ValidationResult, command: CreateLoadBalancerCommand
    ) -> None:
        value = command.app_name
        if value is None or not value.strip():
            check_required_text(result, "app_name", value)
            return
        if not name_builder.check_strict_name(value):
            result.add(
                "app_name",
                APP_NAME_ILLEGAL_CHAR,
                "The application name must consist of alphanumeric characters",
            )
            return
        if name_builder.uses_reserved_format(value):
            result.add("app_name", RESERVED_FORMAT, _RESERVED_MESSAGE)
            return
        if not await self.application_registry.is_registered_for_load_balancer(value):
            result.add(
                "app_name",
                APP_NAME_NONEXISTENT,
                f"Application '{value}' is not registered for load balancers",
            )
            return
        name = name_builder.compose_name(
            value, command.new_stack or command.stack, command.detail
        )
        if len(name) > self.max_name_length:
            result.add(
                "app_name",
                name_builder.NAME_TOO_LONG,
                f"The complete load balancer name cannot exceed {self.max_name_length} "
                "characters",
            )

    def _validate_stack(
        self, result: ValidationResult, command: CreateLoadBalancerCommand
    ) -> None:
        value = command.stack
        if not name_builder.check_name(value):
            result.add(
                "stack",
                STACK_ILLEGAL_CHAR,
                "The stack must be empty or consist of alphanumeric characters",
            )
        elif name_builder.uses_reserved_format(value):
            result.add("stack", RESERVED_FORMAT, _RESERVED_MESSAGE)

    def _validate_new_stack(
        self, result: ValidationResult, command: CreateLoadBalancerCommand
    ) -> None:
        value = command.new_stack
        if not name_builder.check_name(value):
            result.add(
                "new_stack",
                STACK_ILLEGAL_CHAR,
                "The new stack must be empty or consist of alphanumeric characters",
            )
        elif name_builder.uses_reserved_format(value):
            result.add("new_stack", RESERVED_FORMAT, _RESERVED_MESSAGE)

        # Reported even when the stack values are otherwise invalid.
        if value and command.stack:
            result.add(
                "new_stack",
                STACK_MATCHES_NEW_STACK,
                "Select an existing stack or enter a new one, not both",
            )

    def _validate_detail(
        self, result: ValidationResult, command: CreateLoadBalancerCommand
    ) -> None:
        value = command.detail
        if not name_builder.check_detail(value):
            result.add(
                "detail",
                DETAIL_ILLEGAL_CHAR,
                "The detail must be empty or consist of alphanumeric characters and hyphens",
            )
        elif name_builder.uses_reserved_format(value):
            result.add("detail", RESERVED_FORMAT, _RESERVED_MESSAGE)

    def _validate_listeners(
        self, result: ValidationResult, command: CreateLoadBalancerCommand
    ) -> None:
        result.extend(
            validate_listener_values(
                command.protocol1,
                command.lb_port1,
                command.instance_port1,
                fields=PRIMARY_LISTENER_FIELDS,
            )
        )

        # Secondary ports are range-checked whenever they are supplied.
        check_port(result, "lb_port2", command.lb_port2, required=False)
        check_port(result, "instance_port2", command.instance_port2, required=False)

        if not command.protocol2:
            return
        if command.lb_port2 is None or command.instance_port2 is None:
            result.add(
                "protocol2",
                SECOND_LISTENER_PORTS,
                "Please enter port numbers for the second protocol",
            )
        elif command.lb_port1 is not None and command.lb_port2 == command.lb_port1:
            result.add(
                "lb_port2",
                DUPLICATE_LISTENER_PORT,
                f"Only one listener may use load balancer port {command.lb_port2}",
            )
