import pytest

from pastebin_client.api.http_client import HttpClient
from pastebin_client.config import PastebinConfig
from pastebin_client.tests.utils.mock_transport import MockTransport


@pytest.fixture
def config() -> PastebinConfig:
    """Create test config."""
    return PastebinConfig()


@pytest.fixture
def mock_transport() -> MockTransport:
    """Create mock transport."""
    return MockTransport()


@pytest.fixture
def http(config: PastebinConfig, mock_transport: MockTransport) -> HttpClient:
    return HttpClient(config, transport=mock_transport)
