"""Monitoring infrastructure for the load balancer manager."""

from __future__ import annotations

from .metrics import OperationMetricsCollector

__all__ = ["OperationMetricsCollector"]
