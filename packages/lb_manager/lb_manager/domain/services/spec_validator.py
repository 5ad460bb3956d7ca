"""Validation of listener and health check parameters.

Validators never raise on bad input; they return a ValidationResult so that
every problem can be reported to the operator at once.
"""

from __future__ import annotations

from dataclasses import dataclass

from lb_manager.domain.entities import HealthCheckSpec, ListenerSpec
from lb_manager.domain.validation import ValidationResult

PORT_MIN = 0
PORT_MAX = 65535

HEALTH_CHECK_MIN = 0
HEALTH_CHECK_MAX = 1000

REQUIRED = "nullable"
BLANK = "blank"
OUT_OF_RANGE = "range"


@dataclass(frozen=True)
class ListenerFields:
    """Input field names used when reporting listener errors."""

    protocol: str = "protocol"
    load_balancer_port: str = "lb_port"
    instance_port: str = "instance_port"


@dataclass(frozen=True)
class HealthCheckFields:
    """Input field names used when reporting health check errors."""

    target: str = "target"
    interval: str = "interval"
    timeout: str = "timeout"
    unhealthy_threshold: str = "unhealthy"
    healthy_threshold: str = "healthy"


DEFAULT_LISTENER_FIELDS = ListenerFields()
DEFAULT_HEALTH_CHECK_FIELDS = HealthCheckFields()


def check_required_text(result: ValidationResult, field_name: str, value: str | None) -> None:
    """Record an error if a text field is missing or blank."""
    if value is None:
        result.add(field_name, REQUIRED, f"Property [{field_name}] cannot be null")
    elif not value.strip():
        result.add(field_name, BLANK, f"Property [{field_name}] cannot be blank")


def check_range(
    result: ValidationResult,
    field_name: str,
    value: int | None,
    minimum: int,
    maximum: int,
    required: bool = True,
) -> None:
    """Record an error if an integer field is missing or outside [minimum, maximum]."""
    if value is None:
        if required:
            result.add(field_name, REQUIRED, f"Property [{field_name}] cannot be null")
        return
    if not minimum <= value <= maximum:
        result.add(
            field_name,
            OUT_OF_RANGE,
            f"Property [{field_name}] with value [{value}] does not fall within the valid "
            f"range from [{minimum}] to [{maximum}]",
        )


def check_port(
    result: ValidationResult, field_name: str, value: int | None, required: bool = True
) -> None:
    """Record an error if a port is missing or not a valid port number."""
    check_range(result, field_name, value, PORT_MIN, PORT_MAX, required=required)


def validate_listener_values(
    protocol: str | None,
    load_balancer_port: int | None,
    instance_port: int | None,
    fields: ListenerFields = DEFAULT_LISTENER_FIELDS,
) -> ValidationResult:
    """Validate raw listener input, any part of which may be missing."""
    result = ValidationResult()
    check_required_text(result, fields.protocol, protocol)
    check_port(result, fields.load_balancer_port, load_balancer_port)
    check_port(result, fields.instance_port, instance_port)
    return result


def validate_listener(
    spec: ListenerSpec, fields: ListenerFields = DEFAULT_LISTENER_FIELDS
) -> ValidationResult:
    """Validate a listener: non-empty protocol and both ports in range."""
    return validate_listener_values(
        spec.protocol, spec.load_balancer_port, spec.instance_port, fields=fields
    )


def validate_health_check_values(
    target: str | None,
    interval: int | None,
    timeout: int | None,
    unhealthy_threshold: int | None,
    healthy_threshold: int | None,
    fields: HealthCheckFields = DEFAULT_HEALTH_CHECK_FIELDS,
) -> ValidationResult:
    """Validate raw health check input.

    Each numeric value is checked on its own; interval and timeout are not
    compared with each other.
    """
    result = ValidationResult()
    check_required_text(result, fields.target, target)
    for field_name, value in (
        (fields.interval, interval),
        (fields.timeout, timeout),
        (fields.unhealthy_threshold, unhealthy_threshold),
        (fields.healthy_threshold, healthy_threshold),
    ):
        check_range(result, field_name, value, HEALTH_CHECK_MIN, HEALTH_CHECK_MAX)
    return result


def validate_health_check(
    spec: HealthCheckSpec, fields: HealthCheckFields = DEFAULT_HEALTH_CHECK_FIELDS
) -> ValidationResult:
    """Validate a complete health check specification."""
    return validate_health_check_values(
        spec.target,
        spec.interval,
        spec.timeout,
        spec.unhealthy_threshold,
        spec.healthy_threshold,
        fields=fields,
    )
