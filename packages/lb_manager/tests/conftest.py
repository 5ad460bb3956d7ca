"""Shared fixtures for load balancer manager tests."""

from __future__ import annotations

from typing import Any

import pytest
from lb_manager.application.models import CreateLoadBalancerCommand, UpdateLoadBalancerCommand
from lb_manager.application.services import LoadBalancerOrchestrator
from lb_manager.infrastructure.cloud import (
    InMemoryAutoScalingGroupLookup,
    InMemoryCloudLoadBalancerClient,
    StaticStackCatalog,
    StaticZoneCatalog,
)
from lb_manager.infrastructure.registry import InMemoryApplicationRegistry

ZONES = ["us-east-1a", "us-east-1b", "us-east-1c"]


def create_command(**overrides: Any) -> CreateLoadBalancerCommand:
    """Build a create command that passes validation unless overridden."""
    values: dict[str, Any] = {
        "app_name": "helloworld",
        "stack": "test",
        "detail": "",
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
    values.update(overrides)
    return CreateLoadBalancerCommand(**values)


def update_command(**overrides: Any) -> UpdateLoadBalancerCommand:
    """Build an update command with a valid health check unless overridden."""
    values: dict[str, Any] = {
        "name": "helloworld-test",
        "selected_zones": ["us-east-1a", "us-east-1c"],
        "target": "HTTP:7001/healthcheck",
        "interval": 10,
        "timeout": 5,
        "unhealthy": 2,
        "healthy": 10,
    }
    values.update(overrides)
    return UpdateLoadBalancerCommand(**values)


@pytest.fixture
def registry() -> InMemoryApplicationRegistry:
    """Registry with helloworld allowed to own load balancers."""
    return InMemoryApplicationRegistry(["helloworld", "mimir"])


@pytest.fixture
def cloud() -> InMemoryCloudLoadBalancerClient:
    """In-memory cloud restricted to the test zones."""
    return InMemoryCloudLoadBalancerClient(available_zones=ZONES)


@pytest.fixture
def auto_scaling_lookup() -> InMemoryAutoScalingGroupLookup:
    return InMemoryAutoScalingGroupLookup()


@pytest.fixture
def orchestrator(
    cloud: InMemoryCloudLoadBalancerClient,
    registry: InMemoryApplicationRegistry,
    auto_scaling_lookup: InMemoryAutoScalingGroupLookup,
) -> LoadBalancerOrchestrator:
    """Orchestrator wired to in-memory adapters."""
    return LoadBalancerOrchestrator(
        cloud=cloud,
        application_registry=registry,
        zone_catalog=StaticZoneCatalog(ZONES),
        stack_catalog=StaticStackCatalog(["test", "prod"]),
        auto_scaling_lookup=auto_scaling_lookup,
    )


@pytest.fixture
def make_create_command() -> Any:
    """Factory for create commands."""
    return create_command


@pytest.fixture
def make_update_command() -> Any:
    """Factory for update commands."""
    return update_command
