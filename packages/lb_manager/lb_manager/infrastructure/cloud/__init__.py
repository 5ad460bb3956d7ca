"""Cloud adapters for the load balancer manager."""

from __future__ import annotations

from .catalogs import InMemoryAutoScalingGroupLookup, StaticStackCatalog, StaticZoneCatalog
from .in_memory_cloud import InMemoryCloudLoadBalancerClient

__all__ = [
    "InMemoryAutoScalingGroupLookup",
    "InMemoryCloudLoadBalancerClient",
    "StaticStackCatalog",
    "StaticZoneCatalog",
]
