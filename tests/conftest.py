import pytest
from prometheus_client import REGISTRY

from volspec.core.spec import SpecHandler


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    # Keep env-driven settings deterministic in tests
    for name in ("VOLSPEC_ENV", "VOLSPEC_STRICT", "VOLSPEC_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture()
def handler():
    return SpecHandler()


@pytest.fixture()
def strict_handler():
    return SpecHandler(strict=True)


@pytest.fixture()
def sample_value():
    def _get(name: str, labels: dict) -> float:
        return REGISTRY.get_sample_value(name, labels) or 0.0

    return _get
