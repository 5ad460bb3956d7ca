"""Domain interfaces for the load balancer manager.

This module contains abstract interfaces for the external services the
manager talks to.
"""

from __future__ import annotations

from .application_registry import ApplicationRegistry
from .catalogs import AutoScalingGroupLookup, StackCatalog, ZoneCatalog
from .cloud_load_balancer import CloudLoadBalancerClient

__all__ = [
    "ApplicationRegistry",
    "AutoScalingGroupLookup",
    "CloudLoadBalancerClient",
    "StackCatalog",
    "ZoneCatalog",
]
