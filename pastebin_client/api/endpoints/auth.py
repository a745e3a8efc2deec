"""Authentication-related API endpoints."""

import structlog

from pastebin_client.api import params
from pastebin_client.api.endpoints import LOGIN_URL
from pastebin_client.api.http_client import HttpClient

logger = structlog.get_logger(__name__)


def obtain_user_key(http: HttpClient, dev_key: str, username: str, password: str) -> str:
    """
    Log in and get a user session key.

    The key does not expire unless a new one is requested, so it only needs
    to be obtained once per session.

    Args:
        http: HTTP client.
        dev_key: API developer key.
        username: Pastebin username.
        password: Pastebin password.

    Returns:
        The user key.

    Raises:
        ValueError: If any argument is empty.
        APIRequestError: If the login is rejected.
    """
    if not dev_key:
        msg = "dev_key required"
        raise ValueError(msg)
    if not username or not password:
        msg = "Username and password required"
        raise ValueError(msg)

    lines = http.post(
        LOGIN_URL,
        dict(
            [
                params.dev_key(dev_key),
                params.username(username),
                params.password(password),
            ]
        ),
    )
    logger.info("User key obtained", username=username)
    return lines[0]
