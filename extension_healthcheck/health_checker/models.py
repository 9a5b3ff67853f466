"""Health check models, enums, and data classes."""
from dataclasses import dataclass
from typing import Any, Dict

from extension_healthcheck.core.utils import StringEnum


class ConditionStatus(StringEnum):
    """Status of a health condition, using Kubernetes condition values."""
    TRUE = "True"
    FALSE = "False"
    UNKNOWN = "Unknown"


@dataclass(frozen=True)
class CheckRequest:
    """Identifies the deployment whose resources are checked.

    The namespace is where checked resources live; the name identifies the
    owning extension resource and is distinct from the checked resource's name.
    """
    namespace: str
    name: str


@dataclass(frozen=True)
class SingleCheckResult:
    """Outcome of a check that completed.

    Checks that could not complete raise instead of returning a result.
    """
    status: ConditionStatus
    detail: str = ""
    reason: str = ""

    @classmethod
    def healthy(cls) -> "SingleCheckResult":
        return cls(status=ConditionStatus.TRUE)

    @classmethod
    def unhealthy(cls, detail: str, reason: str) -> "SingleCheckResult":
        if not detail or not reason:
            raise ValueError("unhealthy check result requires both detail and reason")
        return cls(status=ConditionStatus.FALSE, detail=detail, reason=reason)

    @property
    def is_healthy(self) -> bool:
        return self.status == ConditionStatus.TRUE

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {"status": self.status.value}
        if self.detail:
            result["detail"] = self.detail
        if self.reason:
            result["reason"] = self.reason
        return result
