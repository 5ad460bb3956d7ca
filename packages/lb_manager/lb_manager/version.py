"""Version information for the load balancer manager."""

__version__ = "0.1.0"
