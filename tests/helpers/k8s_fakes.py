"""Lightweight seed cluster stubs for unit tests.

These provide only what the managed resource health check touches, keeping
tests fast and self-contained without a cluster.
"""

from __future__ import annotations

import asyncio
from typing import Any

from kubernetes.client.rest import ApiException

from extension_healthcheck.domain.managed_resource import ManagedResource, ObjectKey


def make_condition(
    type_: str,
    status: str = "True",
    reason: str = "",
    message: str = "",
) -> dict[str, Any]:
    return {
        "type": type_,
        "status": status,
        "reason": reason,
        "message": message,
        "lastTransitionTime": "2026-10-01T12:00:00Z",
    }


def make_managed_resource_body(
    *,
    name: str = "frontend-mr",
    namespace: str = "ns1",
    generation: int = 1,
    observed_generation: int = 1,
    applied: str | None = "True",
    healthy: str | None = "True",
    reason: str = "",
    message: str = "",
) -> dict[str, Any]:
    """Build a ManagedResource as returned by the custom objects API.

    Pass None for applied/healthy to omit that condition.
    """
    conditions: list[dict[str, Any]] = []
    if applied is not None:
        conditions.append(make_condition("ResourcesApplied", applied, reason, message))
    if healthy is not None:
        conditions.append(make_condition("ResourcesHealthy", healthy, reason, message))
    return {
        "apiVersion": "resources.gardener.cloud/v1alpha1",
        "kind": "ManagedResource",
        "metadata": {"name": name, "namespace": namespace, "generation": generation},
        "spec": {"secretRefs": [{"name": name}]},
        "status": {"observedGeneration": observed_generation, "conditions": conditions},
    }


def make_managed_resource(**kwargs: Any) -> ManagedResource:
    return ManagedResource.from_api(make_managed_resource_body(**kwargs))


class FakeCustomObjectsApi:
    """Fake CustomObjectsApi serving ManagedResource bodies from memory."""

    def __init__(self, objects: dict[tuple[str, str], dict[str, Any]] | None = None) -> None:
        self._objects = objects or {}
        self.calls: list[dict[str, Any]] = []

    def get_namespaced_custom_object(
        self, group: str, version: str, namespace: str, plural: str, name: str, **kwargs: Any
    ) -> dict[str, Any]:
        self.calls.append(
            {"group": group, "version": version, "namespace": namespace, "plural": plural, "name": name, **kwargs}
        )
        try:
            return self._objects[(namespace, name)]
        except KeyError:
            raise ApiException(status=404, reason="Not Found") from None


class FakeClusterAccessor:
    """In-memory ClusterAccessor.

    ``error`` is raised by every get; ``block`` makes get wait until cancelled.
    """

    def __init__(
        self,
        resources: list[ManagedResource] | None = None,
        error: Exception | None = None,
        block: bool = False,
    ) -> None:
        self._resources = {ObjectKey(r.namespace, r.name): r for r in resources or []}
        self._error = error
        self._block = block
        self.started = asyncio.Event()
        self.requested: list[ObjectKey] = []

    async def get(self, key: ObjectKey) -> ManagedResource:
        self.requested.append(key)
        self.started.set()
        if not key.name:
            raise ValueError("resource name may not be empty")
        if self._block:
            await asyncio.Event().wait()
        await asyncio.sleep(0)
        if self._error is not None:
            raise self._error
        try:
            return self._resources[key]
        except KeyError:
            raise ApiException(status=404, reason="Not Found") from None
