"""Abstract interface for the application registry."""

from __future__ import annotations

from abc import ABC, abstractmethod


class ApplicationRegistry(ABC):
    """Resolves which applications may own load balancers."""

    @abstractmethod
    async def is_registered_for_load_balancer(self, app_name: str) -> bool:
        """Check whether an application is registered and allowed to own a load balancer.

        Args:
            app_name: Application name typed by the operator.

        Returns:
            True if a load balancer may be created for this application.
        """
        pass

    @abstractmethod
    async def list_applications_for_load_balancer(self) -> list[str]:
        """List the applications that may own load balancers."""
        pass
