"""Load balancer manager: naming, validation and reconciliation of cloud load balancers."""

from .version import __version__

__all__ = ["__version__"]
