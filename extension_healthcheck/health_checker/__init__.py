"""Health checker module - the check contract and its managed resource implementation.

The implementation is organized into:
- models: Condition status, check request and result types
- base: The HealthCheck contract shared by all checks
- managed_resource: ManagedResource health check
"""

from extension_healthcheck.health_checker.base import HealthCheck
from extension_healthcheck.health_checker.managed_resource import (
    REASON_MANAGED_RESOURCE_UNHEALTHY,
    ManagedResourceHealthChecker,
    check_managed_resource,
    managed_resource_is_healthy,
)
from extension_healthcheck.health_checker.models import (
    CheckRequest,
    ConditionStatus,
    SingleCheckResult,
)

__all__ = [
    # Models
    "ConditionStatus",
    "CheckRequest",
    "SingleCheckResult",
    # Contract
    "HealthCheck",
    # Managed resource
    "REASON_MANAGED_RESOURCE_UNHEALTHY",
    "ManagedResourceHealthChecker",
    "check_managed_resource",
    "managed_resource_is_healthy",
]
