"""Infrastructure layer for the load balancer manager."""
