"""Health check for a single ManagedResource in the seed cluster."""
import asyncio
import copy
import logging
from typing import Callable, Optional

from extension_healthcheck.core.exceptions import (
    ManagedResourceConditionError,
    ManagedResourceFetchError,
    ManagedResourceUnhealthyError,
    PreconditionFailedError,
)
from extension_healthcheck.core.logging import get_named_logger
from extension_healthcheck.domain.managed_resource import ManagedResource, ObjectKey
from extension_healthcheck.health_checker.base import HealthCheck
from extension_healthcheck.health_checker.models import CheckRequest, SingleCheckResult
from extension_healthcheck.services.seed_client import ClusterAccessor
from extension_healthcheck.utils import health

REASON_MANAGED_RESOURCE_UNHEALTHY = "ManagedResourceUnhealthy"

StatusEvaluator = Callable[[ManagedResource], None]


class ManagedResourceHealthChecker(HealthCheck):
    """Checks the health of the ManagedResource named at construction.

    The resource is looked up in the namespace of each CheckRequest.
    """

    def __init__(self, managed_resource_name: str, evaluator: Optional[StatusEvaluator] = None) -> None:
        self.managed_resource_name = managed_resource_name
        self.evaluator: StatusEvaluator = evaluator or health.check_managed_resource
        self.seed_client: Optional[ClusterAccessor] = None
        self.logging_identity: Optional[str] = None
        self.logger: logging.Logger = logging.getLogger(__name__)

    def inject_cluster_accessor(self, accessor: ClusterAccessor) -> None:
        self.seed_client = accessor

    def set_logging_identity(self, provider: str, extension: str) -> None:
        # Write-once; later calls keep the first identity
        if self.logging_identity is not None:
            self.logger.debug(f"Ignoring logging identity {provider}-{extension}, already set to {self.logging_identity}")
            return
        self.logging_identity = f"{provider}-{extension}-healthcheck-managed-resource"
        self.logger = get_named_logger(self.logging_identity)

    def clone(self) -> "ManagedResourceHealthChecker":
        return copy.copy(self)

    async def check(self, request: CheckRequest) -> SingleCheckResult:
        if self.seed_client is None:
            raise PreconditionFailedError(
                f"health check for managed resource '{self.managed_resource_name}' "
                f"has no cluster accessor injected"
            )

        key = ObjectKey(namespace=request.namespace, name=self.managed_resource_name)
        try:
            managed_resource = await self.seed_client.get(key)
        except asyncio.CancelledError:
            self.logger.error(f"Health check cancelled while retrieving managed resource {key}")
            raise
        except Exception as e:
            error = ManagedResourceFetchError(self.managed_resource_name, request.namespace, cause=e)
            self.logger.error(f"Health check failed: {error}")
            raise error from e

        is_healthy, reason, err = managed_resource_is_healthy(managed_resource, self.evaluator)
        if not is_healthy:
            self.logger.error(f"Health check failed: {err}")
            return SingleCheckResult.unhealthy(detail=str(err), reason=reason)

        return SingleCheckResult.healthy()


def managed_resource_is_healthy(
        managed_resource: ManagedResource,
        evaluator: StatusEvaluator = health.check_managed_resource,
) -> tuple[bool, Optional[str], Optional[ManagedResourceUnhealthyError]]:
    """Run the status evaluator and describe its verdict.

    Returns:
        (True, None, None) when healthy, otherwise
        (False, reason code, error whose message is the unhealthy detail).
    """
    try:
        evaluator(managed_resource)
    except ManagedResourceConditionError as e:
        err = ManagedResourceUnhealthyError(managed_resource.name, managed_resource.namespace, cause=e)
        return False, REASON_MANAGED_RESOURCE_UNHEALTHY, err
    return True, None, None


def check_managed_resource(
        managed_resource_name: str, evaluator: Optional[StatusEvaluator] = None
) -> ManagedResourceHealthChecker:
    """Create a health check for the ManagedResource with the given name.

    Dependencies are injected later by the controller that registers the check.
    """
    return ManagedResourceHealthChecker(managed_resource_name, evaluator=evaluator)
