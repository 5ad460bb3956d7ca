"""Integration tests running a load balancer through its whole lifecycle."""

from __future__ import annotations

import pytest
import pytest_asyncio
from lb_manager.application.models import (
    AddListenerCommand,
    CreateLoadBalancerCommand,
    OperationResult,
    RemoveListenerCommand,
    UpdateLoadBalancerCommand,
)
from lb_manager.application.services import LoadBalancerOrchestrator
from lb_manager.bootstrap import create_orchestrator
from lb_manager.config import CloudConfig, LBManagerSettings, MonitoringConfig
from lb_manager.domain.entities import InstanceState
from lb_manager.domain.exceptions import NotFoundError, PartialFailureError, ValidationError
from lb_manager.infrastructure.cloud import (
    InMemoryAutoScalingGroupLookup,
    InMemoryCloudLoadBalancerClient,
)
from lb_manager.infrastructure.registry import InMemoryApplicationRegistry

ZONES = ["us-west-2a", "us-west-2b", "us-west-2c"]

HEALTH_CHECK = {
    "target": "HTTP:7001/healthcheck",
    "interval": 10,
    "timeout": 5,
    "unhealthy": 2,
    "healthy": 10,
}


@pytest.fixture
def cloud() -> InMemoryCloudLoadBalancerClient:
    return InMemoryCloudLoadBalancerClient(available_zones=ZONES)


@pytest.fixture
def groups() -> InMemoryAutoScalingGroupLookup:
    return InMemoryAutoScalingGroupLookup()


@pytest_asyncio.fixture
async def orchestrator(
    cloud: InMemoryCloudLoadBalancerClient, groups: InMemoryAutoScalingGroupLookup
) -> LoadBalancerOrchestrator:
    """Orchestrator built through the bootstrap with a registered application."""
    registry = InMemoryApplicationRegistry()
    await registry.register("helloworld")
    settings = LBManagerSettings(
        cloud=CloudConfig(region="us-west-2", available_zones=ZONES, stacks=["test"]),
        monitoring=MonitoringConfig(metrics_enabled=False),
    )
    return create_orchestrator(
        settings, cloud=cloud, application_registry=registry, auto_scaling_lookup=groups
    )


class TestLoadBalancerLifecycle:
    """End-to-end flows through the orchestrator."""

    @pytest.mark.asyncio
    async def test_full_lifecycle(
        self,
        orchestrator: LoadBalancerOrchestrator,
        cloud: InMemoryCloudLoadBalancerClient,
        groups: InMemoryAutoScalingGroupLookup,
    ) -> None:
        """Test create, inspect, reconcile, change listeners and delete."""
        created = await orchestrator.create_load_balancer(
            CreateLoadBalancerCommand(
                app_name="helloworld",
                stack="test",
                detail="frontend",
                selected_zones=["us-west-2a", "us-west-2b"],
                protocol1="HTTP",
                lb_port1=80,
                instance_port1=7001,
                **HEALTH_CHECK,
            )
        )
        name = created.resource_name
        assert name == "helloworld-test-frontend"

        listed = await orchestrator.list_load_balancers(["helloworld"])
        assert [lb.name for lb in listed] == [name]

        await orchestrator.add_listener(
            AddListenerCommand(name=name, protocol="TCP", lb_port=8443, instance_port=7443)
        )

        updated = await orchestrator.update_load_balancer(
            UpdateLoadBalancerCommand(
                name=name, selected_zones=["us-west-2b", "us-west-2c"], **HEALTH_CHECK
            )
        )
        assert updated.zones_added == ["us-west-2c"]
        assert updated.zones_removed == ["us-west-2a"]
        assert updated.health_check_updated

        await groups.attach("helloworld-test-frontend-v001", name)
        await cloud.set_instance_states(name, [InstanceState("i-42", "InService")])
        details = await orchestrator.get_load_balancer_details(name)
        assert details.load_balancer.sorted_zones == ["us-west-2b", "us-west-2c"]
        assert [lst.load_balancer_port for lst in details.load_balancer.sorted_listeners] == [
            80,
            8443,
        ]
        assert details.cluster_names == ["helloworld-test-frontend"]
        assert details.instance_states[0].state == "InService"

        await orchestrator.remove_listener(RemoveListenerCommand(name=name, lb_port=8443))

        deleted = await orchestrator.delete_load_balancer(name)
        assert deleted.success
        with pytest.raises(NotFoundError):
            await orchestrator.get_load_balancer_details(name)

    @pytest.mark.asyncio
    async def test_unregistered_application_is_rejected(
        self, orchestrator: LoadBalancerOrchestrator, cloud: InMemoryCloudLoadBalancerClient
    ) -> None:
        command = CreateLoadBalancerCommand(
            app_name="ghost",
            selected_zones=["us-west-2a"],
            protocol1="HTTP",
            lb_port1=80,
            instance_port1=7001,
            **HEALTH_CHECK,
        )

        with pytest.raises(ValidationError) as exc_info:
            await orchestrator.create_load_balancer(command)

        result = OperationResult.from_error(exc_info.value)
        assert [fe.code for fe in result.field_errors] == ["application.name.nonexistent"]
        assert await cloud.list_load_balancers() == []

    @pytest.mark.asyncio
    async def test_partial_update_is_reported(
        self, orchestrator: LoadBalancerOrchestrator, cloud: InMemoryCloudLoadBalancerClient
    ) -> None:
        """Test a zone the cloud refuses does not block the other changes."""
        await orchestrator.create_load_balancer(
            CreateLoadBalancerCommand(
                app_name="helloworld",
                selected_zones=["us-west-2a"],
                protocol1="HTTP",
                lb_port1=80,
                instance_port1=7001,
                **HEALTH_CHECK,
            )
        )

        with pytest.raises(PartialFailureError) as exc_info:
            await orchestrator.update_load_balancer(
                UpdateLoadBalancerCommand(
                    name="helloworld",
                    selected_zones=["us-west-2a", "eu-west-1a"],
                    **{**HEALTH_CHECK, "interval": 60},
                )
            )

        result = OperationResult.from_error(exc_info.value)
        assert not result.success
        assert result.error_code == "PARTIAL_FAILURE"
        assert exc_info.value.failed_operations == ["add_zones"]

        load_balancer = await cloud.describe_load_balancer("helloworld")
        assert load_balancer.zones == {"us-west-2a"}
        assert load_balancer.health_check.interval == 60
