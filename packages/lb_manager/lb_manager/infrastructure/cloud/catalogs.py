"""Static zone and stack catalogs and an in-memory group lookup."""

from __future__ import annotations

import asyncio

from lb_manager.domain.interfaces import AutoScalingGroupLookup, StackCatalog, ZoneCatalog


class StaticZoneCatalog(ZoneCatalog):
    """Zone catalog backed by a configured list."""

    def __init__(self, zones: list[str]) -> None:
        self._zones = sorted(set(zones))

    async def available_zones(self) -> list[str]:
        return list(self._zones)


class StaticStackCatalog(StackCatalog):
    """Stack catalog backed by a configured list."""

    def __init__(self, stacks: list[str] | None = None) -> None:
        self._stacks = sorted(set(stacks or []))

    async def stacks(self) -> list[str]:
        return list(self._stacks)


class InMemoryAutoScalingGroupLookup(AutoScalingGroupLookup):
    """Tracks which groups are attached to which load balancers."""

    def __init__(self) -> None:
        self._groups: dict[str, set[str]] = {}
        self._lock = asyncio.Lock()

    async def attach(self, group_name: str, load_balancer_name: str) -> None:
        """Record that a group sends traffic through a load balancer."""
        async with self._lock:
            self._groups.setdefault(load_balancer_name, set()).add(group_name)

    async def group_names_for_load_balancer(self, load_balancer_name: str) -> list[str]:
        async with self._lock:
            return sorted(self._groups.get(load_balancer_name, set()))
