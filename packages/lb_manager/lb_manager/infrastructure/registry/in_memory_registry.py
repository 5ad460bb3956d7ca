"""In-memory application registry."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass

from lb_manager.domain.interfaces import ApplicationRegistry
from lb_manager.infrastructure.logging import get_logger

logger = get_logger(__name__)


@dataclass
class RegisteredApplication:
    """An application known to the registry.

    Attributes:
        name: Application name
        load_balancer_allowed: Whether the application may own load balancers
    """

    name: str
    load_balancer_allowed: bool = True


class InMemoryApplicationRegistry(ApplicationRegistry):
    """Application registry kept in a dictionary keyed by lower-cased name."""

    def __init__(self, app_names: list[str] | None = None) -> None:
        """Initialize the registry.

        Args:
            app_names: Applications to register as allowed to own load balancers
        """
        self._applications: dict[str, RegisteredApplication] = {}
        self._lock = asyncio.Lock()
        for app_name in app_names or []:
            self._applications[app_name.lower()] = RegisteredApplication(app_name)

    async def register(self, app_name: str, load_balancer_allowed: bool = True) -> None:
        """Register or re-register an application."""
        async with self._lock:
            self._applications[app_name.lower()] = RegisteredApplication(
                app_name, load_balancer_allowed
            )
            logger.info(
                "Application registered",
                extra={"app_name": app_name, "load_balancer_allowed": load_balancer_allowed},
            )

    async def is_registered_for_load_balancer(self, app_name: str) -> bool:
        async with self._lock:
            application = self._applications.get(app_name.lower())
            return application is not None and application.load_balancer_allowed

    async def list_applications_for_load_balancer(self) -> list[str]:
        async with self._lock:
            return sorted(
                app.name for app in self._applications.values() if app.load_balancer_allowed
            )
