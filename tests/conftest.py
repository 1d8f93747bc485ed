import pytest

from naija_states import Registry, default_registry, get_settings
from tests.fixtures import sample_state_payloads


@pytest.fixture(autouse=True)
def clear_cached_state():
    """Settings and the default registry are cached per process; reset them around each test."""
    get_settings.cache_clear()
    default_registry.cache_clear()
    yield
    get_settings.cache_clear()
    default_registry.cache_clear()


@pytest.fixture()
def registry():
    return default_registry()


@pytest.fixture()
def sample_registry():
    return Registry.from_records(sample_state_payloads())
