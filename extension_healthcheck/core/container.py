from dishka import AsyncContainer, make_async_container

from extension_healthcheck.core.providers import (
    KubernetesProvider,
    LoggingProvider,
    SeedClientProvider,
    SettingsProvider,
)
from extension_healthcheck.health_checker.managed_resource import (
    ManagedResourceHealthChecker,
    check_managed_resource,
)
from extension_healthcheck.services.seed_client import ClusterAccessor
from extension_healthcheck.settings import Settings


def create_health_check_container() -> AsyncContainer:
    """
    Create the DI container holding settings, logging and seed cluster access.
    """
    return make_async_container(
        SettingsProvider(),
        LoggingProvider(),
        KubernetesProvider(),
        SeedClientProvider(),
    )


async def create_managed_resource_check(
        container: AsyncContainer, managed_resource_name: str
) -> ManagedResourceHealthChecker:
    """Build a managed resource check with its accessor and logging identity injected."""
    settings = await container.get(Settings)
    accessor = await container.get(ClusterAccessor)

    health_check = check_managed_resource(managed_resource_name)
    health_check.inject_cluster_accessor(accessor)
    health_check.set_logging_identity(settings.HEALTH_CHECK_PROVIDER, settings.HEALTH_CHECK_EXTENSION)
    return health_check
