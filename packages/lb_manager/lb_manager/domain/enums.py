"""Domain enums for the load balancer manager."""

from __future__ import annotations

from enum import Enum


class StackChoiceKind(Enum):
    """How the stack component of a load balancer name was supplied."""

    EXISTING = "EXISTING"
    NEW = "NEW"
    NONE = "NONE"


class OperationType(Enum):
    """Operator-facing load balancer operations."""

    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    ADD_LISTENER = "add_listener"
    REMOVE_LISTENER = "remove_listener"


class SubOperation(Enum):
    """Independent steps of a load balancer update."""

    ADD_ZONES = "add_zones"
    REMOVE_ZONES = "remove_zones"
    CONFIGURE_HEALTH_CHECK = "configure_health_check"
