import tomllib
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class Settings(BaseModel):
    """Health check settings loaded from TOML configuration files.

    Load order (each layer overrides the previous, missing files are skipped):
        1. config_path    — base settings (committed to git)
        2. secrets_path   — sensitive overrides (gitignored, mounted from K8s Secret in prod)
        3. override_path  — per-deployment overrides (provider/extension names, timeouts)

    Usage:
        Settings()                                         # config.toml + secrets
        Settings(config_path="config.test.toml")           # test config
        Settings(override_path="config.provider-aws.toml") # base + secrets + override
    """

    model_config = ConfigDict(extra="forbid")

    def __init__(
        self,
        config_path: str = "config.toml",
        override_path: str | None = None,
        secrets_path: str = "secrets.toml",
    ) -> None:
        data: dict = {}
        for path in (config_path, secrets_path, override_path):
            if path and Path(path).is_file():
                with open(path, "rb") as f:
                    data |= tomllib.load(f)
        super().__init__(**data)

    PROJECT_NAME: str = "extension-healthcheck"

    # Logging configuration
    LOG_LEVEL: str = Field(default="INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)")

    # Seed cluster access
    KUBERNETES_CONFIG_PATH: str | None = "~/.kube/config"
    KUBERNETES_IN_CLUSTER: bool = False
    K8S_REQUEST_TIMEOUT_SECONDS: float = Field(default=10.0, gt=0)

    # ManagedResource API coordinates
    MANAGED_RESOURCE_GROUP: str = "resources.gardener.cloud"
    MANAGED_RESOURCE_VERSION: str = "v1alpha1"
    MANAGED_RESOURCE_PLURAL: str = "managedresources"

    # Logging identity of registered checks
    HEALTH_CHECK_PROVIDER: str = "provider"
    HEALTH_CHECK_EXTENSION: str = "extension"


def get_settings() -> Settings:
    return Settings()
