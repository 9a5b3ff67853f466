class HealthCheckError(Exception):
    """Base exception for health check errors."""

    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__(message)
        self.message = message
        self.cause = cause


class PreconditionFailedError(HealthCheckError):
    """Raised when a check runs before its dependencies were injected."""


class ManagedResourceFetchError(HealthCheckError):
    """The managed resource could not be read, so health could not be determined."""

    def __init__(self, name: str, namespace: str, cause: Exception | None = None):
        super().__init__(
            f"check managed resource failed, unable to retrieve managed resource "
            f"'{name}' in namespace '{namespace}': {cause}",
            cause=cause,
        )
        self.name = name
        self.namespace = namespace


class ManagedResourceConditionError(HealthCheckError):
    """Raised by the status evaluator when a managed resource fails its health criteria."""


class ManagedResourceUnhealthyError(HealthCheckError):
    """A fetched managed resource was evaluated as unhealthy."""

    def __init__(self, name: str, namespace: str, cause: Exception):
        super().__init__(
            f"managed resource {name} in namespace {namespace} is unhealthy: {cause}",
            cause=cause,
        )
        self.name = name
        self.namespace = namespace
