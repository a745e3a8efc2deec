"""
Pastebin client exception hierarchy.

All exceptions inherit from PastebinError for easy catching.
"""

from typing import Any


class PastebinError(Exception):
    """Base exception for all pastebin_client errors."""

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        if self.context:
            ctx = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx})"
        return self.message


class PastebinConnectionError(PastebinError):
    """Network-level error (unreachable host, DNS or TLS failure, broken stream)."""

    def __init__(self, message: str, *, url: str | None = None) -> None:
        super().__init__(message, url=url)
        self.url = url


class EmptyResponseError(PastebinError):
    """The server answered with zero lines."""

    def __init__(
        self, message: str = "No answer from the server", *, endpoint: str | None = None
    ) -> None:
        if endpoint is None:
            super().__init__(message)
        else:
            super().__init__(message, endpoint=endpoint)
        self.endpoint = endpoint


class APIRequestError(PastebinError):
    """
    The server rejected the request.

    The message is the server's own text (e.g. "Bad API request, invalid
    api_dev_key"), kept verbatim so callers can display it as-is.
    """

    def __init__(
        self,
        message: str,
        *,
        endpoint: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.endpoint = endpoint
        self.status_code = status_code


class NotFoundError(PastebinError):
    """No paste matched a title, or the public raw page does not exist."""

    def __init__(
        self,
        message: str,
        *,
        title: str | None = None,
        paste_key: str | None = None,
    ) -> None:
        context = {}
        if title is not None:
            context["title"] = title
        if paste_key is not None:
            context["paste_key"] = paste_key
        super().__init__(message, **context)
        self.title = title
        self.paste_key = paste_key


class MalformedResponseError(PastebinError):
    """A paste-list response could not be parsed into complete records."""

    def __init__(self, message: str, *, field: str | None = None) -> None:
        if field is None:
            super().__init__(message)
        else:
            super().__init__(message, field=field)
        self.field = field
