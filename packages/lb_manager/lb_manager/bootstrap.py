"""Wiring of settings, adapters and the orchestrator."""

from __future__ import annotations

from lb_manager.application.services import LoadBalancerOrchestrator
from lb_manager.config import LBManagerSettings, get_settings
from lb_manager.domain.exceptions import ConfigurationError
from lb_manager.domain.interfaces import (
    ApplicationRegistry,
    AutoScalingGroupLookup,
    CloudLoadBalancerClient,
)
from lb_manager.infrastructure.cloud import (
    InMemoryAutoScalingGroupLookup,
    InMemoryCloudLoadBalancerClient,
    StaticStackCatalog,
    StaticZoneCatalog,
)
from lb_manager.infrastructure.logging import get_logger, setup_logging
from lb_manager.infrastructure.monitoring import OperationMetricsCollector
from lb_manager.infrastructure.registry import InMemoryApplicationRegistry

logger = get_logger(__name__)


def create_orchestrator(
    settings: LBManagerSettings | None = None,
    cloud: CloudLoadBalancerClient | None = None,
    application_registry: ApplicationRegistry | None = None,
    auto_scaling_lookup: AutoScalingGroupLookup | None = None,
    configure_logging: bool = False,
) -> LoadBalancerOrchestrator:
    """Build an orchestrator from settings.

    Collaborators that are not supplied fall back to the in-memory adapters,
    which is what local runs and tests use.

    Args:
        settings: Settings to use; read from the environment when omitted
        cloud: Cloud load balancing client
        application_registry: Application registry
        auto_scaling_lookup: Group attachment lookup
        configure_logging: Apply the logging settings to the root logger

    Returns:
        A ready-to-use LoadBalancerOrchestrator

    Raises:
        ConfigurationError: If no availability zones are configured
    """
    settings = settings or get_settings()
    if configure_logging:
        setup_logging(settings.logging)

    zones = settings.cloud.available_zones
    if not zones:
        raise ConfigurationError("cloud.available_zones", "at least one zone is required")

    orchestrator = LoadBalancerOrchestrator(
        cloud=cloud or InMemoryCloudLoadBalancerClient(available_zones=zones),
        application_registry=application_registry or InMemoryApplicationRegistry(),
        zone_catalog=StaticZoneCatalog(zones),
        stack_catalog=StaticStackCatalog(settings.cloud.stacks),
        auto_scaling_lookup=auto_scaling_lookup or InMemoryAutoScalingGroupLookup(),
        max_name_length=settings.naming.max_name_length,
        metrics=OperationMetricsCollector(enabled=settings.monitoring.metrics_enabled),
    )
    logger.info(
        "Orchestrator created",
        extra={"region": settings.cloud.region, "zones": zones},
    )
    return orchestrator
