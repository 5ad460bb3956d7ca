"""Domain services for the load balancer manager."""

from __future__ import annotations

from . import name_builder, spec_validator
from .zone_reconciler import ZoneDiff, reconcile_zones

__all__: list[str] = ["ZoneDiff", "name_builder", "reconcile_zones", "spec_validator"]
