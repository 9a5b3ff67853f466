"""ManagedResource model as served by the seed cluster's custom objects API.

Only the fields the health evaluation reads are modelled; everything else in
the object is ignored.
"""
from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.dataclasses import dataclass

from extension_healthcheck.core.utils import StringEnum


MANAGED_RESOURCE_KIND = "ManagedResource"


class ManagedResourceConditionType(StringEnum):
    RESOURCES_APPLIED = "ResourcesApplied"
    RESOURCES_HEALTHY = "ResourcesHealthy"


@dataclass(frozen=True)
class ObjectKey:
    namespace: str
    name: str

    def __str__(self) -> str:
        return f"{self.namespace}/{self.name}"


class _K8sModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class Condition(_K8sModel):
    type: str
    status: str
    reason: str = ""
    message: str = ""
    last_transition_time: Optional[datetime] = Field(default=None, alias="lastTransitionTime")
    last_update_time: Optional[datetime] = Field(default=None, alias="lastUpdateTime")


class ObjectMeta(_K8sModel):
    name: str = ""
    namespace: str = ""
    generation: int = 0


class ManagedResourceStatus(_K8sModel):
    observed_generation: int = Field(default=0, alias="observedGeneration")
    conditions: list[Condition] = Field(default_factory=list)


class ManagedResource(_K8sModel):
    metadata: ObjectMeta = Field(default_factory=ObjectMeta)
    status: ManagedResourceStatus = Field(default_factory=ManagedResourceStatus)

    @property
    def name(self) -> str:
        return self.metadata.name

    @property
    def namespace(self) -> str:
        return self.metadata.namespace

    def get_condition(self, condition_type: str) -> Condition | None:
        for condition in self.status.conditions:
            if condition.type == condition_type:
                return condition
        return None

    @classmethod
    def from_api(cls, body: dict[str, Any]) -> ManagedResource:
        kind = body.get("kind")
        if kind is not None and kind != MANAGED_RESOURCE_KIND:
            raise ValueError(f"expected kind {MANAGED_RESOURCE_KIND}, got {kind}")
        return cls.model_validate(body)
