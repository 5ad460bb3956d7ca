"""Domain layer for the load balancer manager."""
