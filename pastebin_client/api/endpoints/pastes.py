"""Paste-related API endpoints."""

import structlog

from pastebin_client.api import params
from pastebin_client.api.endpoints import POST_URL, PRIVATE_RAW_URL, PUBLIC_RAW_URL, ApiOption
from pastebin_client.api.http_client import HttpClient
from pastebin_client.config import MAX_RESULTS_LIMIT, MIN_RESULTS_LIMIT
from pastebin_client.exceptions import NotFoundError
from pastebin_client.models.paste import Found, Missing, Paste, PasteLookup, Visibility
from pastebin_client.parsing.paste_list import parse_paste_list

logger = structlog.get_logger(__name__)


def create_paste(
    http: HttpClient,
    dev_key: str,
    code: str,
    name: str | None = None,
    visibility: Visibility | int | None = None,
    expire_date: str | None = None,
    paste_format: str | None = None,
    user_key: str | None = None,
) -> str:
    """
    Create a new paste.

    Omitted fields fall back to the service defaults: untitled, public,
    "text" format and no owner (anonymous paste).

    Args:
        http: HTTP client.
        dev_key: API developer key.
        code: Paste contents.
        name: Paste title.
        visibility: 0 = public, 1 = unlisted, 2 = private.
        expire_date: Expiration descriptor, e.g. "N" or "10M" (see ExpireDate).
        paste_format: Syntax highlighting identifier, e.g. "python".
        user_key: Owner's user key. Leave out for an anonymous paste.

    Returns:
        URL of the new paste.
    """
    _require(dev_key=dev_key, code=code)
    if visibility is not None:
        visibility = Visibility(visibility)

    lines = http.post(
        POST_URL,
        dict(
            [
                params.option(ApiOption.PASTE),
                params.dev_key(dev_key),
                params.code(code),
                params.name(name),
                params.visibility(visibility),
                params.expire_date(expire_date),
                params.paste_format(paste_format),
                params.user_key(user_key or None),
            ]
        ),
    )
    logger.info("Paste created", url=lines[0], anonymous=not user_key)
    return lines[0]


def list_pastes(
    http: HttpClient, dev_key: str, user_key: str, results_limit: int | None = None
) -> list[str]:
    """
    List a user's pastes, metadata only.

    Args:
        http: HTTP client.
        dev_key: API developer key.
        user_key: User key of the owner.
        results_limit: Maximum number of pastes, 1 to 1000. Defaults to the
            configured limit (50).

    Returns:
        Raw pseudo-XML response lines; see parse_paste_list.

    Raises:
        ValueError: If results_limit is out of range.
    """
    _require(dev_key=dev_key, user_key=user_key)
    if results_limit is None:
        results_limit = http.config.default_results_limit
    if not MIN_RESULTS_LIMIT <= results_limit <= MAX_RESULTS_LIMIT:
        msg = f"results_limit must be between {MIN_RESULTS_LIMIT} and {MAX_RESULTS_LIMIT}"
        raise ValueError(msg)

    return http.post(
        POST_URL,
        dict(
            [
                params.dev_key(dev_key),
                params.user_key(user_key),
                params.results_limit(results_limit),
                params.option(ApiOption.LIST),
            ]
        ),
    )


def list_pastes_parsed(
    http: HttpClient, dev_key: str, user_key: str, results_limit: int | None = None
) -> list[Paste]:
    """Version of list_pastes returning parsed Paste metadata."""
    return parse_paste_list(list_pastes(http, dev_key, user_key, results_limit))


def find_paste_by_title(http: HttpClient, dev_key: str, user_key: str, title: str) -> PasteLookup:
    """
    Find the first of a user's pastes with exactly this title.

    Returns:
        Found with the paste, or Missing when no title matches.
    """
    for paste in list_pastes_parsed(http, dev_key, user_key):
        if paste.title == title:
            logger.debug("Paste title resolved", title=title, key=paste.key)
            return Found(paste)
    return Missing(title)


def delete_paste(http: HttpClient, dev_key: str, user_key: str, paste_key: str) -> list[str]:
    """
    Delete one of a user's pastes.

    Returns:
        Confirmation lines from the server.
    """
    _require(dev_key=dev_key, user_key=user_key, paste_key=paste_key)
    lines = http.post(
        POST_URL,
        dict(
            [
                params.dev_key(dev_key),
                params.user_key(user_key),
                params.paste_key(paste_key),
                params.option(ApiOption.DELETE),
            ]
        ),
    )
    logger.info("Paste deleted", key=paste_key)
    return lines


def delete_paste_by_name(
    http: HttpClient, dev_key: str, user_key: str, paste_name: str
) -> list[str]:
    """
    Delete the first of a user's pastes titled paste_name.

    Lists the user's pastes, then deletes the match; the two requests are not
    atomic.

    Raises:
        NotFoundError: If no paste has that title.
    """
    lookup = find_paste_by_title(http, dev_key, user_key, paste_name)
    if isinstance(lookup, Missing):
        msg = f"Could not delete the paste titled '{paste_name}'. No such paste was found."
        raise NotFoundError(msg, title=paste_name)
    return delete_paste(http, dev_key, user_key, lookup.paste.key)


def fetch_private_raw(http: HttpClient, dev_key: str, user_key: str, paste_key: str) -> list[str]:
    """
    Get the raw contents of one of a user's pastes, private ones included.

    For public pastes fetch_public_raw needs no credentials.
    """
    _require(dev_key=dev_key, user_key=user_key, paste_key=paste_key)
    return http.post(
        PRIVATE_RAW_URL,
        dict(
            [
                params.dev_key(dev_key),
                params.user_key(user_key),
                params.paste_key(paste_key),
                params.option(ApiOption.SHOW_PASTE),
            ]
        ),
    )


def fetch_public_raw(http: HttpClient, paste_key: str) -> list[str]:
    """
    Get the raw contents of any public paste.

    Reads the public raw view page directly; this is not an API call and
    sends no credentials.

    Raises:
        NotFoundError: If the page does not exist.
    """
    _require(paste_key=paste_key)
    return http.get(PUBLIC_RAW_URL + paste_key)


def fetch_raw_by_name(http: HttpClient, dev_key: str, user_key: str, paste_name: str) -> list[str]:
    """
    Get the raw contents of the first of a user's pastes titled paste_name.

    Raises:
        NotFoundError: If no paste has that title.
    """
    lookup = find_paste_by_title(http, dev_key, user_key, paste_name)
    if isinstance(lookup, Missing):
        msg = (
            f"Could not get the raw data of the paste titled '{paste_name}'. "
            "No such paste was found."
        )
        raise NotFoundError(msg, title=paste_name)
    return fetch_private_raw(http, dev_key, user_key, lookup.paste.key)


def _require(**values: str) -> None:
    for key, value in values.items():
        if not value:
            msg = f"{key} required"
            raise ValueError(msg)
