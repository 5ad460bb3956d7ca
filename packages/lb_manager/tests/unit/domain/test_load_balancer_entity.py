"""Unit tests for the LoadBalancer entity."""

from __future__ import annotations

import pytest
from lb_manager.domain.entities import ListenerSpec, LoadBalancer


class TestLoadBalancer:
    """Tests for LoadBalancer."""

    def test_listeners_keyed_by_port(self) -> None:
        """Test listeners are kept per load balancer port and listed in port order."""
        load_balancer = LoadBalancer(name="helloworld-test", zones={"us-east-1b", "us-east-1a"})
        load_balancer.add_listener(ListenerSpec("HTTPS", 443, 7443))
        load_balancer.add_listener(ListenerSpec("HTTP", 80, 7001))

        assert [lst.load_balancer_port for lst in load_balancer.sorted_listeners] == [80, 443]
        assert load_balancer.sorted_zones == ["us-east-1a", "us-east-1b"]

    def test_duplicate_port_rejected(self) -> None:
        load_balancer = LoadBalancer(name="lb")
        load_balancer.add_listener(ListenerSpec("HTTP", 80, 7001))

        with pytest.raises(ValueError, match="port 80"):
            load_balancer.add_listener(ListenerSpec("TCP", 80, 7002))

    def test_remove_listener(self) -> None:
        load_balancer = LoadBalancer(name="lb")
        listener = ListenerSpec("HTTP", 80, 7001)
        load_balancer.add_listener(listener)

        assert load_balancer.remove_listener(80) == listener
        assert load_balancer.remove_listener(80) is None
        assert load_balancer.listeners == {}
