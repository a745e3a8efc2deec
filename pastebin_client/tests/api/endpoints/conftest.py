from unittest.mock import Mock

import pytest

from pastebin_client.config import PastebinConfig


@pytest.fixture
def mock_http() -> Mock:
    http = Mock()
    http.config = PastebinConfig()
    return http
