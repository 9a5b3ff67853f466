"""
Base health check contract.

Every check registered with an extension's health check controller implements
this interface. Controllers hold heterogeneous checks and drive them only
through these four operations:

1. ``inject_cluster_accessor`` and ``set_logging_identity`` once, after construction.
2. ``clone`` before every evaluation, so overlapping evaluations never share
   a check object.
3. ``check`` on the clone.
"""

from abc import ABC, abstractmethod
from typing import Any

from extension_healthcheck.health_checker.models import CheckRequest, SingleCheckResult


class HealthCheck(ABC):
    """Abstract base class for health checks."""

    @abstractmethod
    def inject_cluster_accessor(self, accessor: Any) -> None:
        """Set the client used to read resources from the target cluster."""

    @abstractmethod
    def set_logging_identity(self, provider: str, extension: str) -> None:
        """Derive the logger used for diagnostics from the provider/extension pair."""

    @abstractmethod
    def clone(self) -> "HealthCheck":
        """Return an independent copy sharing the injected dependencies."""

    @abstractmethod
    async def check(self, request: CheckRequest) -> SingleCheckResult:
        """
        Perform the health check for the deployment identified by ``request``.

        Returns:
            SingleCheckResult with status True, or False with detail and reason.

        Raises:
            HealthCheckError: If health could not be determined.
            asyncio.CancelledError: If the calling task was cancelled.
        """
