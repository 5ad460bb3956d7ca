"""Application registry adapters."""

from __future__ import annotations

from .in_memory_registry import InMemoryApplicationRegistry, RegisteredApplication

__all__ = ["InMemoryApplicationRegistry", "RegisteredApplication"]
