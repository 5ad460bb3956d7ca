"""Domain entities for the load balancer manager."""

from __future__ import annotations

from .load_balancer import (
    HealthCheckSpec,
    InstanceState,
    ListenerSpec,
    LoadBalancer,
    LoadBalancerDetails,
)
from .stack_choice import StackChoice

__all__ = [
    "HealthCheckSpec",
    "InstanceState",
    "ListenerSpec",
    "LoadBalancer",
    "LoadBalancerDetails",
    "StackChoice",
]
