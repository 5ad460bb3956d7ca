"""Application layer models for the load balancer manager."""

from __future__ import annotations

from .load_balancer_models import (
    AddListenerCommand,
    CreateLoadBalancerCommand,
    CreateOptions,
    EditOptions,
    FieldErrorInfo,
    HealthCheckInput,
    OperationResult,
    RemoveListenerCommand,
    SubOperationOutcome,
    UpdateLoadBalancerCommand,
    UpdateResult,
)

__all__ = [
    "AddListenerCommand",
    "CreateLoadBalancerCommand",
    "CreateOptions",
    "EditOptions",
    "FieldErrorInfo",
    "HealthCheckInput",
    "OperationResult",
    "RemoveListenerCommand",
    "SubOperationOutcome",
    "UpdateLoadBalancerCommand",
    "UpdateResult",
]
