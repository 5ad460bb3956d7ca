"""Abstract interface for the cloud load balancing API.

This module defines the contract the manager relies on to create, describe
and change load balancers. Implementations wrap a provider SDK; they own
timeouts and cancellation, and report rejected calls by raising
CloudServiceError.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from lb_manager.domain.entities import HealthCheckSpec, InstanceState, ListenerSpec, LoadBalancer


class CloudLoadBalancerClient(ABC):
    """Contract for the provider-side load balancer operations."""

    @abstractmethod
    async def create_load_balancer(
        self, name: str, zones: list[str], listeners: list[ListenerSpec]
    ) -> LoadBalancer:
        """Create a load balancer.

        Args:
            name: Canonical load balancer name.
            zones: Availability zones to attach.
            listeners: Listeners to create with the load balancer.

        Returns:
            The created load balancer.

        Raises:
            CloudServiceError: If the provider rejects the request.
        """
        pass

    @abstractmethod
    async def describe_load_balancer(self, name: str) -> LoadBalancer:
        """Describe a single load balancer.

        Raises:
            NotFoundError: If no load balancer has this name.
        """
        pass

    @abstractmethod
    async def list_load_balancers(self) -> list[LoadBalancer]:
        """Describe every load balancer in the account and region."""
        pass

    @abstractmethod
    async def delete_load_balancer(self, name: str) -> None:
        """Delete a load balancer."""
        pass

    @abstractmethod
    async def add_zones(self, name: str, zones: list[str]) -> None:
        """Attach availability zones to a load balancer."""
        pass

    @abstractmethod
    async def remove_zones(self, name: str, zones: list[str]) -> None:
        """Detach availability zones from a load balancer."""
        pass

    @abstractmethod
    async def add_listeners(self, name: str, listeners: list[ListenerSpec]) -> None:
        """Create listeners on a load balancer."""
        pass

    @abstractmethod
    async def remove_listeners(self, name: str, ports: list[int]) -> None:
        """Delete the listeners on the given load balancer ports."""
        pass

    @abstractmethod
    async def configure_health_check(self, name: str, health_check: HealthCheckSpec) -> None:
        """Replace the health check of a load balancer."""
        pass

    @abstractmethod
    async def describe_instance_health(self, name: str) -> list[InstanceState]:
        """Report the health of every instance registered with a load balancer."""
        pass
