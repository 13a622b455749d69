"""
Shared test fixtures and configuration for pytest
"""
import pytest

from tmpmail.core.session import SessionStore
from tmpmail.utils.config import AppConfig
from tmpmail.utils.console import reset_console
from tmpmail.utils.logging import reset_logging

from .test_helpers import FakeProvider


@pytest.fixture
def session_dir(tmp_path):
    """Session directory isolated per test"""
    return tmp_path / "session"


@pytest.fixture
def app_config(session_dir):
    """Configuration pointing at the fake provider and a temp session dir"""
    return AppConfig(
        provider_base_url="https://mail.test/api/v1/",
        shortener_url="https://short.test/create.php?format=simple",
        session_dir=session_dir,
        browser="true",
        clipboard_cmd="cat",
    )


@pytest.fixture
def store(session_dir):
    """Session store in the temp session dir"""
    return SessionStore(session_dir)


@pytest.fixture
def fake_provider():
    """Fake provider serving a single domain and an empty inbox"""
    return FakeProvider(domains=['example.com'])


@pytest.fixture
def provider(fake_provider, app_config):
    """ProviderClient bound to fake_provider"""
    client = fake_provider.client(app_config)
    yield client
    client.close()


@pytest.fixture(autouse=True)
def clean_globals():
    """Reset shared consoles and logging handlers around each test"""
    reset_console()
    reset_logging()
    yield
    reset_console()
    reset_logging()
