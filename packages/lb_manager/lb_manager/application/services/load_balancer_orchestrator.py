"""Load balancer orchestration application service."""

from __future__ import annotations

import time
from collections.abc import Iterable, Iterator
from contextlib import contextmanager

from lb_manager.application.error_handling import OutcomeAggregator, upstream_message
from lb_manager.application.models import (
    AddListenerCommand,
    CreateLoadBalancerCommand,
    CreateOptions,
    EditOptions,
    FieldErrorInfo,
    OperationResult,
    RemoveListenerCommand,
    UpdateLoadBalancerCommand,
    UpdateResult,
)
from lb_manager.application.services.command_validator import CommandValidator
from lb_manager.domain.entities import LoadBalancer, LoadBalancerDetails
from lb_manager.domain.enums import OperationType, SubOperation
from lb_manager.domain.exceptions import (
    CreateError,
    DeleteError,
    HealthCheckNotConfiguredError,
    ListenerError,
    LoadBalancerOperationError,
    NotFoundError,
    PartialFailureError,
    UpdateError,
    ValidationError,
)
from lb_manager.domain.interfaces import (
    ApplicationRegistry,
    AutoScalingGroupLookup,
    CloudLoadBalancerClient,
    StackCatalog,
    ZoneCatalog,
)
from lb_manager.domain.services import name_builder, reconcile_zones
from lb_manager.domain.services.spec_validator import validate_health_check_values
from lb_manager.infrastructure.logging import get_logger
from lb_manager.infrastructure.monitoring import OperationMetricsCollector

logger = get_logger(__name__)


def describe_zones(verb: str, preposition: str, zones: list[str]) -> str:
    """Render a zone change, e.g. "Added zones us-east-1a, us-east-1b to load balancer."."""
    plural = "" if len(zones) == 1 else "s"
    return f"{verb} zone{plural} {', '.join(zones)} {preposition} load balancer."


class LoadBalancerOrchestrator:
    """Application service coordinating every load balancer operation.

    Each operation validates its input completely before the first cloud
    call, then issues a bounded sequence of calls. Cloud failures are caught
    per call and reported; they are never retried and nothing is rolled
    back, so the load balancer is left in whatever state the calls that
    succeeded produced.
    """

    def __init__(
        self,
        cloud: CloudLoadBalancerClient,
        application_registry: ApplicationRegistry,
        zone_catalog: ZoneCatalog,
        stack_catalog: StackCatalog | None = None,
        auto_scaling_lookup: AutoScalingGroupLookup | None = None,
        max_name_length: int = name_builder.NAME_MAX_LENGTH,
        metrics: OperationMetricsCollector | None = None,
    ) -> None:
        """Initialize the orchestrator.

        Args:
            cloud: Cloud load balancing API client
            application_registry: Registry resolving application ownership
            zone_catalog: Source of available zones
            stack_catalog: Source of existing stacks
            auto_scaling_lookup: Read-only group attachment lookup
            max_name_length: Maximum length of a complete load balancer name
            metrics: Metrics collector, disabled when omitted
        """
        self.cloud = cloud
        self.application_registry = application_registry
        self.zone_catalog = zone_catalog
        self.stack_catalog = stack_catalog
        self.auto_scaling_lookup = auto_scaling_lookup
        self.max_name_length = max_name_length
        self.metrics = metrics or OperationMetricsCollector(enabled=False)
        self.validator = CommandValidator(application_registry, max_name_length)
        logger.info("LoadBalancerOrchestrator initialized")

    @contextmanager
    def _track(self, operation: OperationType) -> Iterator[None]:
        """Record the outcome and duration of an operation."""
        started = time.perf_counter()
        status = "success"
        try:
            yield
        except ValidationError:
            status = "validation_error"
            raise
        except NotFoundError:
            status = "not_found"
            raise
        except PartialFailureError:
            status = "partial_failure"
            raise
        except LoadBalancerOperationError:
            status = "failure"
            raise
        except Exception:
            status = "error"
            raise
        finally:
            self.metrics.record_operation(operation, status, time.perf_counter() - started)

    async def create_load_balancer(self, command: CreateLoadBalancerCommand) -> OperationResult:
        """Create a load balancer and configure its health check.

        Args:
            command: Create request as submitted by the operator

        Returns:
            OperationResult naming the new load balancer

        Raises:
            ValidationError: With every field error; nothing was created
            CreateError: If the cloud rejected the creation
            HealthCheckNotConfiguredError: If the load balancer exists but its
                health check could not be set
        """
        with self._track(OperationType.CREATE):
            validation = await self.validator.validate_create(command)
            validation.raise_if_invalid("Invalid load balancer request", command=command)

            stack_choice = command.stack_choice
            name = name_builder.build_name(
                command.app_name or "",
                stack_choice.name,
                command.detail,
                max_length=self.max_name_length,
            )
            zones = sorted(set(command.selected_zones))
            listeners = command.listeners()

            logger.info(
                "Creating load balancer",
                extra={
                    "load_balancer_name": name,
                    "zones": zones,
                    "listener_ports": [listener.load_balancer_port for listener in listeners],
                    "new_stack": stack_choice.is_new,
                },
            )

            try:
                await self.cloud.create_load_balancer(name, zones, listeners)
            except Exception as e:
                logger.error(
                    "Failed to create load balancer",
                    exc_info=e,
                    extra={"load_balancer_name": name},
                )
                raise CreateError(name, upstream_message(e), command=command) from e

            try:
                await self.cloud.configure_health_check(name, command.to_health_check())
            except Exception as e:
                logger.error(
                    "Load balancer created without health check",
                    exc_info=e,
                    extra={"load_balancer_name": name},
                )
                raise HealthCheckNotConfiguredError(
                    name, upstream_message(e), command=command
                ) from e

            logger.info("Load balancer created", extra={"load_balancer_name": name})
            return OperationResult(
                success=True,
                resource_name=name,
                message=f"Load Balancer '{name}' has been created.",
            )

    async def update_load_balancer(self, command: UpdateLoadBalancerCommand) -> UpdateResult:
        """Reconcile zones and replace the health check.

        Zone additions, zone removals and the health check are attempted
        independently; a failure in one does not stop the others and does
        not undo changes already made.

        Args:
            command: Desired zones and health check for an existing load balancer

        Returns:
            UpdateResult when every attempted step succeeded

        Raises:
            ValidationError: If no name was given
            NotFoundError: If the load balancer does not exist
            PartialFailureError: If some steps succeeded and others failed
            UpdateError: If every attempted step failed
        """
        with self._track(OperationType.UPDATE):
            self.validator.validate_name(command.name).raise_if_invalid(
                "Invalid load balancer update", command=command
            )
            name = command.name
            try:
                load_balancer = await self.cloud.describe_load_balancer(name)
            except NotFoundError:
                raise
            except Exception as e:
                logger.error(
                    "Failed to describe load balancer for update",
                    exc_info=e,
                    extra={"load_balancer_name": name},
                )
                raise UpdateError(name, upstream_message(e), command=command) from e
            diff = reconcile_zones(load_balancer.zones, command.selected_zones)
            aggregator = OutcomeAggregator(name)

            logger.info(
                "Updating load balancer",
                extra={
                    "load_balancer_name": name,
                    "zones_to_add": diff.to_add,
                    "zones_to_remove": diff.to_remove,
                },
            )

            if diff.to_add:
                try:
                    await self.cloud.add_zones(name, diff.to_add)
                    aggregator.add_success(
                        SubOperation.ADD_ZONES,
                        describe_zones("Added", "to", diff.to_add),
                        diff.to_add,
                    )
                except Exception as e:
                    aggregator.add_failure(
                        SubOperation.ADD_ZONES,
                        f"Failed to add zones {', '.join(diff.to_add)}: {upstream_message(e)}",
                        diff.to_add,
                        error=e,
                    )
                self.metrics.record_zone_changes(
                    "added", len(diff.to_add), aggregator.succeeded(SubOperation.ADD_ZONES)
                )

            if diff.to_remove:
                try:
                    await self.cloud.remove_zones(name, diff.to_remove)
                    aggregator.add_success(
                        SubOperation.REMOVE_ZONES,
                        describe_zones("Removed", "from", diff.to_remove),
                        diff.to_remove,
                    )
                except Exception as e:
                    aggregator.add_failure(
                        SubOperation.REMOVE_ZONES,
                        f"Failed to remove zones {', '.join(diff.to_remove)}: "
                        f"{upstream_message(e)}",
                        diff.to_remove,
                        error=e,
                    )
                self.metrics.record_zone_changes(
                    "removed",
                    len(diff.to_remove),
                    aggregator.succeeded(SubOperation.REMOVE_ZONES),
                )

            await self._replace_health_check(name, command, aggregator)

            message = aggregator.get_summary()
            if diff.is_empty:
                message = f"Availability zones unchanged. {message}"

            failed = aggregator.has_failures()
            partial = failed and aggregator.has_successes()
            result = UpdateResult(
                success=not failed,
                resource_name=name,
                message=message,
                error_code=("PARTIAL_FAILURE" if partial else "UPDATE_ERROR") if failed else None,
                outcomes=aggregator.outcomes,
                zones_added=diff.to_add if aggregator.succeeded(SubOperation.ADD_ZONES) else [],
                zones_removed=(
                    diff.to_remove if aggregator.succeeded(SubOperation.REMOVE_ZONES) else []
                ),
                health_check_updated=aggregator.succeeded(SubOperation.CONFIGURE_HEALTH_CHECK),
            )

            if partial:
                raise PartialFailureError(name, result)
            if failed:
                raise UpdateError(name, message, command=command, result=result)

            logger.info(
                "Load balancer updated",
                extra={
                    "load_balancer_name": name,
                    "zones_added": result.zones_added,
                    "zones_removed": result.zones_removed,
                },
            )
            return result

    async def _replace_health_check(
        self,
        name: str,
        command: UpdateLoadBalancerCommand,
        aggregator: OutcomeAggregator,
    ) -> None:
        validation = validate_health_check_values(
            command.target,
            command.interval,
            command.timeout,
            command.unhealthy,
            command.healthy,
        )
        if not validation.is_valid:
            aggregator.add_failure(
                SubOperation.CONFIGURE_HEALTH_CHECK,
                f"Failed to update health check: {validation.summary()}",
                field_errors=[FieldErrorInfo(**error.to_dict()) for error in validation.errors],
            )
            return

        try:
            await self.cloud.configure_health_check(name, command.to_health_check())
        except Exception as e:
            aggregator.add_failure(
                SubOperation.CONFIGURE_HEALTH_CHECK,
                f"Failed to update health check: {upstream_message(e)}",
                error=e,
            )
            return

        aggregator.add_success(
            SubOperation.CONFIGURE_HEALTH_CHECK,
            f"Load Balancer '{name}' health check has been updated.",
        )

    async def delete_load_balancer(self, name: str) -> OperationResult:
        """Delete a load balancer.

        Raises:
            ValidationError: If no name was given
            DeleteError: If the cloud rejected the deletion; the load balancer
                should be treated as still existing
        """
        with self._track(OperationType.DELETE):
            self.validator.validate_name(name).raise_if_invalid("Invalid load balancer delete")
            try:
                await self.cloud.delete_load_balancer(name)
            except Exception as e:
                logger.error(
                    "Failed to delete load balancer",
                    exc_info=e,
                    extra={"load_balancer_name": name},
                )
                raise DeleteError(name, upstream_message(e)) from e

            logger.info("Load balancer deleted", extra={"load_balancer_name": name})
            return OperationResult(
                success=True,
                resource_name=name,
                message=f"Load Balancer '{name}' has been deleted.",
            )

    async def add_listener(self, command: AddListenerCommand) -> OperationResult:
        """Add one listener to a load balancer.

        Raises:
            ValidationError: If the command is incomplete or out of range
            ListenerError: If the cloud rejected the listener
        """
        with self._track(OperationType.ADD_LISTENER):
            self.validator.validate_add_listener(command).raise_if_invalid(
                "Invalid listener", command=command
            )
            name = command.name or ""
            listener = command.to_listener()
            try:
                await self.cloud.add_listeners(name, [listener])
            except Exception as e:
                reason = upstream_message(e)
                logger.error(
                    "Failed to add listener",
                    exc_info=e,
                    extra={"load_balancer_name": name, "port": listener.load_balancer_port},
                )
                raise ListenerError(
                    name, reason, command=command, message=f"Could not add listener: {reason}"
                ) from e

            return OperationResult(
                success=True,
                resource_name=name,
                message=f"Listener has been added to port {listener.load_balancer_port}.",
            )

    async def remove_listener(self, command: RemoveListenerCommand) -> OperationResult:
        """Remove the listener on one load balancer port.

        Raises:
            ValidationError: If the command is incomplete or out of range
            ListenerError: If the cloud rejected the removal
        """
        with self._track(OperationType.REMOVE_LISTENER):
            self.validator.validate_remove_listener(command).raise_if_invalid(
                "Invalid listener removal", command=command
            )
            name = command.name or ""
            port = command.lb_port
            assert port is not None
            try:
                await self.cloud.remove_listeners(name, [port])
            except Exception as e:
                reason = upstream_message(e)
                logger.error(
                    "Failed to remove listener",
                    exc_info=e,
                    extra={"load_balancer_name": name, "port": port},
                )
                raise ListenerError(
                    name,
                    reason,
                    command=command,
                    message=f"Could not remove listener on port {port}: {reason}",
                ) from e

            return OperationResult(
                success=True,
                resource_name=name,
                message=f"Listener on port {port} has been removed.",
            )

    async def list_load_balancers(
        self, app_names: Iterable[str] | None = None
    ) -> list[LoadBalancer]:
        """List load balancers sorted by name, ignoring case.

        Args:
            app_names: Applications to filter by; comma-separated entries are split

        Returns:
            Matching load balancers
        """
        load_balancers = await self.cloud.list_load_balancers()
        wanted = {
            part.strip() for entry in app_names or [] for part in entry.split(",") if part.strip()
        }
        if wanted:
            load_balancers = [
                lb for lb in load_balancers if name_builder.app_name_from_name(lb.name) in wanted
            ]
        return sorted(load_balancers, key=lambda lb: lb.name.lower())

    async def get_load_balancer_details(self, name: str) -> LoadBalancerDetails:
        """Describe a load balancer with its owning application, groups and instance health.

        Raises:
            NotFoundError: If the load balancer does not exist
        """
        load_balancer = await self.cloud.describe_load_balancer(name)
        group_names: list[str] = []
        if self.auto_scaling_lookup is not None:
            group_names = sorted(
                await self.auto_scaling_lookup.group_names_for_load_balancer(name)
            )
        cluster_names = list(
            dict.fromkeys(name_builder.cluster_from_group_name(group) for group in group_names)
        )
        instance_states = await self.cloud.describe_instance_health(name)
        return LoadBalancerDetails(
            load_balancer=load_balancer,
            app_name=name_builder.app_name_from_name(name),
            group_names=group_names,
            cluster_names=cluster_names,
            instance_states=instance_states,
        )

    async def get_create_options(self) -> CreateOptions:
        """Collect the applications, stacks and zones offered when creating."""
        applications = await self.application_registry.list_applications_for_load_balancer()
        stacks = await self.stack_catalog.stacks() if self.stack_catalog is not None else []
        zones = await self.zone_catalog.available_zones()
        return CreateOptions(
            applications=sorted(applications), stacks=sorted(stacks), zones=sorted(zones)
        )

    async def get_edit_options(self, name: str) -> EditOptions:
        """Describe a load balancer together with the zones it could use.

        Raises:
            NotFoundError: If the load balancer does not exist
        """
        load_balancer = await self.cloud.describe_load_balancer(name)
        zones = await self.zone_catalog.available_zones()
        return EditOptions(load_balancer=load_balancer, zones=sorted(zones))
