import pytest

from extension_healthcheck.domain.managed_resource import ManagedResource
from extension_healthcheck.health_checker import CheckRequest, ManagedResourceHealthChecker, check_managed_resource
from extension_healthcheck.settings import Settings

from tests.helpers.k8s_fakes import FakeClusterAccessor, make_managed_resource


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    config = tmp_path / "config.test.toml"
    config.write_text(
        'LOG_LEVEL = "DEBUG"\n'
        'KUBERNETES_CONFIG_PATH = "/tmp/kubeconfig"\n'
        'K8S_REQUEST_TIMEOUT_SECONDS = 3.0\n'
        'HEALTH_CHECK_PROVIDER = "provider-test"\n'
        'HEALTH_CHECK_EXTENSION = "worker"\n'
    )
    return Settings(config_path=str(config), secrets_path=str(tmp_path / "missing.toml"))


@pytest.fixture
def healthy_resource() -> ManagedResource:
    return make_managed_resource(name="frontend-mr", namespace="ns1")


@pytest.fixture
def request_ns1() -> CheckRequest:
    return CheckRequest(namespace="ns1", name="shoot--dev--frontend")


@pytest.fixture
def make_check():
    def _make(
        accessor: FakeClusterAccessor,
        name: str = "frontend-mr",
        **kwargs,
    ) -> ManagedResourceHealthChecker:
        health_check = check_managed_resource(name, **kwargs)
        health_check.inject_cluster_accessor(accessor)
        health_check.set_logging_identity("provider-test", "worker")
        return health_check

    return _make
