"""Abstract interfaces for the read-only lookups the manager consumes."""

from __future__ import annotations

from abc import ABC, abstractmethod


class ZoneCatalog(ABC):
    """Enumerates the availability zones of the current region."""

    @abstractmethod
    async def available_zones(self) -> list[str]:
        """Return the zones a load balancer can be attached to."""
        pass


class StackCatalog(ABC):
    """Enumerates the known environment stacks."""

    @abstractmethod
    async def stacks(self) -> list[str]:
        """Return the names of existing stacks."""
        pass


class AutoScalingGroupLookup(ABC):
    """Read-only view of which auto-scaling groups use a load balancer.

    Attachment itself is managed elsewhere.
    """

    @abstractmethod
    async def group_names_for_load_balancer(self, load_balancer_name: str) -> list[str]:
        """Return the names of the groups attached to a load balancer."""
        pass
