"""
Pastebin client facade.

This is the main entry point for users of the library. It ties the HTTP
client, configuration and credential bundle together.
"""

import httpx
import structlog

from pastebin_client.api.endpoints import pastes
from pastebin_client.api.endpoints.auth import obtain_user_key
from pastebin_client.api.http_client import HttpClient
from pastebin_client.config import PastebinConfig
from pastebin_client.context import PastebinContext
from pastebin_client.models.paste import Visibility

logger = structlog.get_logger(__name__)


class PastebinClient:
    """
    Client for the Pastebin API.

    Holds no connection: every call opens and closes its own.

    Example:
        ```python
        client = PastebinClient()
        ctx = client.login(dev_key, "user", "password")

        url = ctx.create_private_paste("print(1)", "snippet")
        for paste in ctx.list_pastes_parsed():
            print(paste.title, paste.url)
        ```

    Args:
        config: Client configuration. Uses defaults if not provided.
        transport: Optional httpx transport for testing (mock transport).
    """

    def __init__(
        self,
        config: PastebinConfig | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._http = HttpClient(config, transport=transport)
        logger.debug("Client initialized")

    @property
    def http(self) -> HttpClient:
        return self._http

    def login(self, dev_key: str, username: str, password: str) -> PastebinContext:
        """
        Obtain a user key and bundle it with the developer key.

        Raises:
            ValueError: If any argument is empty.
            APIRequestError: If the login is rejected.
        """
        user_key = obtain_user_key(self._http, dev_key, username, password)
        return self.context(dev_key, user_key)

    def context(self, dev_key: str, user_key: str) -> PastebinContext:
        """Bundle an already known user key."""
        return PastebinContext(dev_key, user_key, self._http)

    def create_anonymous_paste(
        self,
        dev_key: str,
        code: str,
        name: str | None = None,
        visibility: Visibility | int | None = None,
        expire_date: str | None = None,
        paste_format: str | None = None,
    ) -> str:
        """Create a paste owned by nobody. Returns its URL."""
        return pastes.create_paste(
            self._http, dev_key, code, name, visibility, expire_date, paste_format
        )

    def fetch_public_raw(self, paste_key: str) -> list[str]:
        """Raw contents of a public paste; no credentials needed."""
        return pastes.fetch_public_raw(self._http, paste_key)
