"""In-memory implementation of the cloud load balancing API.

Mirrors the rules the real service enforces (unique names, one listener per
port, only known zones, at least one zone attached) so the orchestrator can
be exercised end to end without credentials.
"""

from __future__ import annotations

import asyncio
import copy

from lb_manager.domain.entities import HealthCheckSpec, InstanceState, ListenerSpec, LoadBalancer
from lb_manager.domain.exceptions import CloudServiceError, NotFoundError
from lb_manager.domain.interfaces import CloudLoadBalancerClient
from lb_manager.infrastructure.logging import get_logger

logger = get_logger(__name__)


class InMemoryCloudLoadBalancerClient(CloudLoadBalancerClient):
    """Cloud client that keeps load balancers in a dictionary."""

    def __init__(self, available_zones: list[str] | None = None) -> None:
        """Initialize the in-memory client.

        Args:
            available_zones: Zones that may be attached; any zone is accepted when omitted
        """
        self.available_zones = set(available_zones) if available_zones else None
        self._load_balancers: dict[str, LoadBalancer] = {}
        self._instance_states: dict[str, list[InstanceState]] = {}
        self._lock = asyncio.Lock()
        logger.info(
            "InMemoryCloudLoadBalancerClient initialized",
            extra={"available_zones": sorted(self.available_zones or [])},
        )

    def _get(self, operation: str, name: str) -> LoadBalancer:
        load_balancer = self._load_balancers.get(name)
        if load_balancer is None:
            raise CloudServiceError(
                operation,
                f"There is no ACTIVE Load Balancer named '{name}'",
                error_type="LoadBalancerNotFound",
            )
        return load_balancer

    def _check_zones(self, operation: str, zones: list[str]) -> None:
        if self.available_zones is None:
            return
        unknown = sorted(set(zones) - self.available_zones)
        if unknown:
            raise CloudServiceError(
                operation,
                f"Unknown availability zones: {', '.join(unknown)}",
                error_type="InvalidConfigurationRequest",
            )

    async def create_load_balancer(
        self, name: str, zones: list[str], listeners: list[ListenerSpec]
    ) -> LoadBalancer:
        async with self._lock:
            operation = "CreateLoadBalancer"
            if name in self._load_balancers:
                raise CloudServiceError(
                    operation,
                    f"Load Balancer '{name}' already exists",
                    error_type="DuplicateLoadBalancerName",
                )
            if not zones:
                raise CloudServiceError(
                    operation,
                    "At least one availability zone is required",
                    error_type="ValidationError",
                )
            self._check_zones(operation, zones)

            load_balancer = LoadBalancer(name=name, zones=set(zones))
            for listener in listeners:
                try:
                    load_balancer.add_listener(listener)
                except ValueError as e:
                    raise CloudServiceError(
                        operation, str(e), error_type="DuplicateListener"
                    ) from e

            self._load_balancers[name] = load_balancer
            self._instance_states[name] = []
            logger.debug("Stored load balancer", extra={"load_balancer_name": name})
            return copy.deepcopy(load_balancer)

    async def describe_load_balancer(self, name: str) -> LoadBalancer:
        async with self._lock:
            load_balancer = self._load_balancers.get(name)
            if load_balancer is None:
                raise NotFoundError("Load Balancer", name)
            return copy.deepcopy(load_balancer)

    async def list_load_balancers(self) -> list[LoadBalancer]:
        async with self._lock:
            return [copy.deepcopy(lb) for lb in self._load_balancers.values()]

    async def delete_load_balancer(self, name: str) -> None:
        async with self._lock:
            self._get("DeleteLoadBalancer", name)
            del self._load_balancers[name]
            self._instance_states.pop(name, None)

    async def add_zones(self, name: str, zones: list[str]) -> None:
        async with self._lock:
            operation = "EnableAvailabilityZonesForLoadBalancer"
            load_balancer = self._get(operation, name)
            self._check_zones(operation, zones)
            load_balancer.zones.update(zones)

    async def remove_zones(self, name: str, zones: list[str]) -> None:
        async with self._lock:
            operation = "DisableAvailabilityZonesForLoadBalancer"
            load_balancer = self._get(operation, name)
            not_attached = sorted(set(zones) - load_balancer.zones)
            if not_attached:
                raise CloudServiceError(
                    operation,
                    f"Zones not attached to '{name}': {', '.join(not_attached)}",
                    error_type="InvalidConfigurationRequest",
                )
            if not load_balancer.zones - set(zones):
                raise CloudServiceError(
                    operation,
                    "Cannot remove all availability zones from a load balancer",
                    error_type="InvalidConfigurationRequest",
                )
            load_balancer.zones.difference_update(zones)

    async def add_listeners(self, name: str, listeners: list[ListenerSpec]) -> None:
        async with self._lock:
            operation = "CreateLoadBalancerListeners"
            load_balancer = self._get(operation, name)
            ports = [listener.load_balancer_port for listener in listeners]
            taken = sorted(
                {port for port in ports if port in load_balancer.listeners}
                | {port for port in ports if ports.count(port) > 1}
            )
            if taken:
                raise CloudServiceError(
                    operation,
                    f"A listener already exists for '{name}' on port "
                    f"{', '.join(str(port) for port in taken)}",
                    error_type="DuplicateListener",
                )
            for listener in listeners:
                load_balancer.add_listener(listener)

    async def remove_listeners(self, name: str, ports: list[int]) -> None:
        async with self._lock:
            operation = "DeleteLoadBalancerListeners"
            load_balancer = self._get(operation, name)
            missing = sorted(set(ports) - set(load_balancer.listeners))
            if missing:
                raise CloudServiceError(
                    operation,
                    f"No listener on port {', '.join(str(port) for port in missing)}",
                    error_type="ListenerNotFound",
                )
            for port in ports:
                load_balancer.remove_listener(port)

    async def configure_health_check(self, name: str, health_check: HealthCheckSpec) -> None:
        async with self._lock:
            load_balancer = self._get("ConfigureHealthCheck", name)
            load_balancer.health_check = health_check

    async def describe_instance_health(self, name: str) -> list[InstanceState]:
        async with self._lock:
            self._get("DescribeInstanceHealth", name)
            return list(self._instance_states.get(name, []))

    async def set_instance_states(self, name: str, states: list[InstanceState]) -> None:
        """Replace the instance health reported for a load balancer."""
        async with self._lock:
            self._get("RegisterInstancesWithLoadBalancer", name)
            self._instance_states[name] = list(states)
