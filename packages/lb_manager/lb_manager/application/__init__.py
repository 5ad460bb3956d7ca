"""Application layer for the load balancer manager."""
