import asyncio
from typing import Protocol, runtime_checkable

from kubernetes import client as k8s_client

from extension_healthcheck.domain.managed_resource import ManagedResource, ObjectKey
from extension_healthcheck.settings import Settings


@runtime_checkable
class ClusterAccessor(Protocol):
    """Read access to ManagedResources in the seed cluster."""

    async def get(self, key: ObjectKey) -> ManagedResource:
        ...


class ManagedResourceClient:
    """ClusterAccessor backed by the Kubernetes custom objects API.

    The kubernetes client is synchronous, so reads run in a worker thread.
    Cancelling the awaiting task abandons the read immediately; the thread
    finishes in the background bounded by the request timeout.
    ApiException (404 included) is propagated to the caller; an empty name
    is rejected with ValueError before any request is made.
    """

    def __init__(self, custom_objects: k8s_client.CustomObjectsApi, settings: Settings) -> None:
        self._custom_objects = custom_objects
        self._group = settings.MANAGED_RESOURCE_GROUP
        self._version = settings.MANAGED_RESOURCE_VERSION
        self._plural = settings.MANAGED_RESOURCE_PLURAL
        self._request_timeout = settings.K8S_REQUEST_TIMEOUT_SECONDS

    async def get(self, key: ObjectKey) -> ManagedResource:
        # An empty name would address the collection endpoint and return a list
        if not key.name:
            raise ValueError("resource name may not be empty")
        body = await asyncio.to_thread(
            self._custom_objects.get_namespaced_custom_object,
            group=self._group,
            version=self._version,
            namespace=key.namespace,
            plural=self._plural,
            name=key.name,
            _request_timeout=self._request_timeout,
        )
        return ManagedResource.from_api(body)
