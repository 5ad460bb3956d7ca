"""Application services for the load balancer manager."""

from __future__ import annotations

from .command_validator import CommandValidator
from .load_balancer_orchestrator import LoadBalancerOrchestrator

__all__ = [
    "CommandValidator",
    "LoadBalancerOrchestrator",
]
