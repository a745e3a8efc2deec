"""
Pastebin Python Client.

A small, synchronous Python client for the Pastebin API.

Example:
    ```python
    from pastebin_client import PastebinClient

    client = PastebinClient()
    ctx = client.login("dev-key", "user", "password")

    url = ctx.create_private_paste("print('hello')", "hello.py")
    print(ctx.fetch_raw_by_name("hello.py"))
    ```
"""

from pastebin_client.client import PastebinClient
from pastebin_client.config import PastebinConfig
from pastebin_client.context import PastebinContext
from pastebin_client.exceptions import (
    APIRequestError,
    EmptyResponseError,
    MalformedResponseError,
    NotFoundError,
    PastebinConnectionError,
    PastebinError,
)
from pastebin_client.models.paste import ExpireDate, Paste, Visibility
from pastebin_client.parsing.paste_list import parse_paste_list

__version__ = "0.1.0"

__all__ = [
    # Main client
    "PastebinClient",
    "PastebinConfig",
    "PastebinContext",
    # Models
    "ExpireDate",
    "Paste",
    "Visibility",
    "parse_paste_list",
    # Exceptions
    "PastebinError",
    "PastebinConnectionError",
    "EmptyResponseError",
    "APIRequestError",
    "NotFoundError",
    "MalformedResponseError",
]
