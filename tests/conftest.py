"""
Pytest configuration and fixtures
"""
import pytest

from optionkit.core.config import get_settings
from optionkit.host.hooks import Hooks
from optionkit.host.store import NetworkOptionStore, OptionStore
from optionkit.support.default_resolution import PendingState


@pytest.fixture(autouse=True)
def fresh_settings():
    """Drop cached settings so environment changes made by a test are picked up"""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def hooks() -> Hooks:
    return Hooks()


@pytest.fixture
def site_store(hooks: Hooks) -> OptionStore:
    return OptionStore(hooks)


@pytest.fixture
def network_store(hooks: Hooks) -> NetworkOptionStore:
    return NetworkOptionStore(hooks, network_id=1)


@pytest.fixture
def pending() -> PendingState:
    return PendingState()
