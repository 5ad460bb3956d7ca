"""Availability zone reconciliation.

Computes which zones must be attached to and detached from a load balancer
to move it from its current zone set to a desired one. This module never
calls the cloud API; the orchestrator issues the calls it recommends.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass(frozen=True)
class ZoneDiff:
    """Zones to add and remove, each sorted by zone identifier."""

    to_add: list[str] = field(default_factory=list)
    to_remove: list[str] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        """True when current and desired zones already match."""
        return not self.to_add and not self.to_remove

    def apply(self, current: Iterable[str]) -> set[str]:
        """Return the zone set that results from applying this diff."""
        return (set(current) | set(self.to_add)) - set(self.to_remove)


def reconcile_zones(current: Iterable[str], desired: Iterable[str]) -> ZoneDiff:
    """Compare current and desired zones.

    Args:
        current: Zones attached now; duplicates are ignored
        desired: Zones that should be attached; duplicates are ignored

    Returns:
        ZoneDiff with ``desired - current`` to add and ``current - desired``
        to remove, both in lexicographic order
    """
    current_set = set(current)
    desired_set = set(desired)
    return ZoneDiff(
        to_add=sorted(desired_set - current_set),
        to_remove=sorted(current_set - desired_set),
    )
