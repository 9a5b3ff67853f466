import logging
from typing import Iterator

from dishka import Provider, Scope, provide

from extension_healthcheck.core.k8s_clients import K8sClients, close_k8s_clients, create_k8s_clients
from extension_healthcheck.core.logging import setup_logger
from extension_healthcheck.services.seed_client import ClusterAccessor, ManagedResourceClient
from extension_healthcheck.settings import Settings, get_settings


class SettingsProvider(Provider):
    scope = Scope.APP

    @provide
    def get_settings(self) -> Settings:
        return get_settings()


class LoggingProvider(Provider):
    scope = Scope.APP

    @provide
    def get_logger(self, settings: Settings) -> logging.Logger:
        return setup_logger(settings.LOG_LEVEL)


class KubernetesProvider(Provider):
    scope = Scope.APP

    @provide
    def get_k8s_clients(self, settings: Settings, logger: logging.Logger) -> Iterator[K8sClients]:
        clients = create_k8s_clients(
            logger,
            kubeconfig_path=settings.KUBERNETES_CONFIG_PATH,
            in_cluster=settings.KUBERNETES_IN_CLUSTER,
        )
        yield clients
        close_k8s_clients(clients)


class SeedClientProvider(Provider):
    scope = Scope.APP

    @provide
    def get_cluster_accessor(self, clients: K8sClients, settings: Settings) -> ClusterAccessor:
        return ManagedResourceClient(clients.custom_objects, settings)
