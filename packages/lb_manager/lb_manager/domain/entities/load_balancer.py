"""Load balancer domain entities and value types."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime


@dataclass(frozen=True)
class ListenerSpec:
    """A protocol/port mapping from a load balancer port to an instance port.

    Listeners are never changed in place; a different port or protocol
    means removing the listener and adding a new one.

    Attributes:
        protocol: Traffic protocol (e.g. "HTTP", "TCP")
        load_balancer_port: Port the load balancer listens on
        instance_port: Port traffic is forwarded to on each instance
    """

    protocol: str
    load_balancer_port: int
    instance_port: int


@dataclass(frozen=True)
class HealthCheckSpec:
    """Health check parameters, always replaced as a whole.

    Attributes:
        target: Health check target in ``protocol:port[/path]`` form
        interval: Seconds between health checks
        timeout: Seconds before a health check is considered failed
        unhealthy_threshold: Consecutive failures before marking unhealthy
        healthy_threshold: Consecutive successes before marking healthy
    """

    target: str
    interval: int
    timeout: int
    unhealthy_threshold: int
    healthy_threshold: int


@dataclass(frozen=True)
class InstanceState:
    """Health of one instance registered with a load balancer."""

    instance_id: str
    state: str
    reason_code: str | None = None
    description: str | None = None


@dataclass
class LoadBalancer:
    """A load balancer as described by the cloud provider.

    The cloud owns this state; the manager only reads it and reconciles it.

    Attributes:
        name: Canonical name, also the resource identity
        zones: Attached availability zones
        listeners: Listeners keyed by load balancer port
        health_check: Current health check, if one was configured
        created_at: Creation timestamp reported by the provider
    """

    name: str
    zones: set[str] = field(default_factory=set)
    listeners: dict[int, ListenerSpec] = field(default_factory=dict)
    health_check: HealthCheckSpec | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def add_listener(self, listener: ListenerSpec) -> None:
        """Attach a listener.

        Raises:
            ValueError: If a listener already uses the same load balancer port
        """
        if listener.load_balancer_port in self.listeners:
            raise ValueError(
                f"A listener already exists on port {listener.load_balancer_port}"
            )
        self.listeners[listener.load_balancer_port] = listener

    def remove_listener(self, load_balancer_port: int) -> ListenerSpec | None:
        """Detach the listener on a port, returning it if present."""
        return self.listeners.pop(load_balancer_port, None)

    @property
    def sorted_zones(self) -> list[str]:
        """Attached zones in alphabetical order."""
        return sorted(self.zones)

    @property
    def sorted_listeners(self) -> list[ListenerSpec]:
        """Listeners ordered by load balancer port."""
        return [self.listeners[port] for port in sorted(self.listeners)]


@dataclass
class LoadBalancerDetails:
    """Everything the detail view shows about one load balancer.

    Attributes:
        load_balancer: The described load balancer
        app_name: Owning application, parsed from the name
        group_names: Auto-scaling groups attached to the load balancer
        cluster_names: Distinct clusters those groups belong to
        instance_states: Health of each registered instance
    """

    load_balancer: LoadBalancer
    app_name: str
    group_names: list[str] = field(default_factory=list)
    cluster_names: list[str] = field(default_factory=list)
    instance_states: list[InstanceState] = field(default_factory=list)
