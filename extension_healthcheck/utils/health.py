"""Health evaluation of ManagedResource status conditions."""
from extension_healthcheck.core.exceptions import ManagedResourceConditionError
from extension_healthcheck.domain.managed_resource import (
    ManagedResource,
    ManagedResourceConditionType,
)

# Conditions that must all be "True", checked in this order
MANAGED_RESOURCE_HEALTH_CHECKS: tuple[ManagedResourceConditionType, ...] = (
    ManagedResourceConditionType.RESOURCES_APPLIED,
    ManagedResourceConditionType.RESOURCES_HEALTHY,
)

CONDITION_TRUE = "True"


def check_condition_state(condition_type: str, expected: str, actual: str, reason: str, message: str) -> None:
    if expected != actual:
        raise ManagedResourceConditionError(
            f'condition "{condition_type}" has invalid status {actual} (expected {expected}) due to {reason}: {message}'
        )


def check_managed_resource(managed_resource: ManagedResource) -> None:
    """Raise ManagedResourceConditionError if the managed resource is not healthy.

    A managed resource is healthy once the resource manager has observed its
    latest generation and reports both applied and healthy conditions as True.
    """
    status = managed_resource.status
    generation = managed_resource.metadata.generation
    if status.observed_generation < generation:
        raise ManagedResourceConditionError(
            f"observed generation outdated ({status.observed_generation}/{generation})"
        )

    for condition_type in MANAGED_RESOURCE_HEALTH_CHECKS:
        condition = managed_resource.get_condition(condition_type)
        if condition is None:
            raise ManagedResourceConditionError(f"condition {condition_type} is missing")
        check_condition_state(
            condition.type, CONDITION_TRUE, condition.status, condition.reason, condition.message
        )
