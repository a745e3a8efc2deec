"""
HTTP client for the Pastebin API.

Every request gets its own connection: a fresh httpx client is opened,
one request is written, the full response is read as text lines, and
everything is closed again. Nothing is cached or reused between calls.
"""

from collections.abc import Mapping
from typing import Any, Self

import httpx
import structlog

from pastebin_client.api.params import OMIT, ParamValue, encode
from pastebin_client.config import PastebinConfig
from pastebin_client.exceptions import (
    APIRequestError,
    EmptyResponseError,
    NotFoundError,
    PastebinConnectionError,
)

logger = structlog.get_logger(__name__)

CHARSET = "utf-8"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
BAD_REQUEST_MARKER = "Bad API request"

SENSITIVE_KEYS = frozenset(
    {
        "api_dev_key",
        "api_user_key",
        "api_user_password",
        "api_paste_code",
    }
)


def sanitize_for_log(parameters: Mapping[str, ParamValue]) -> dict[str, Any]:
    """
    Prepare request parameters for logging.

    Args:
        parameters: Parameters about to be sent.

    Returns:
        Copy with sensitive values replaced by "***" and omitted fields dropped.
    """
    return {
        key: "***" if key in SENSITIVE_KEYS else value
        for key, value in parameters.items()
        if value is not OMIT
    }


def validate_response(lines: list[str], endpoint: str | None = None) -> list[str]:
    """
    Check an API response for the service's error conventions.

    Args:
        lines: Response body split into lines.
        endpoint: URL the response came from, for error context.

    Returns:
        The same lines, unchanged.

    Raises:
        EmptyResponseError: If the response has no lines.
        APIRequestError: If the first line carries the bad-request marker.
    """
    if not lines:
        raise EmptyResponseError(endpoint=endpoint)
    if lines[0].startswith(BAD_REQUEST_MARKER):
        logger.warning("API request rejected", endpoint=endpoint, reason=lines[0])
        raise APIRequestError(lines[0], endpoint=endpoint)
    return lines


class Connection:
    """A single request/response exchange with one URL."""

    def __init__(self, client: httpx.Client, url: str) -> None:
        self._client = client
        self._url = url
        self._response: httpx.Response | None = None

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    @property
    def url(self) -> str:
        return self._url

    @property
    def status_code(self) -> int | None:
        """HTTP status of the response, once sent."""
        return None if self._response is None else self._response.status_code

    def send(self, body: str | None = None) -> None:
        """
        Write the request.

        Args:
            body: Form-encoded POST body. None sends a bodiless GET instead.

        Raises:
            PastebinConnectionError: If the server cannot be reached.
            RuntimeError: If this connection already carried a request.
        """
        if self._response is not None:
            msg = "Connection already used. Open a new connection per request."
            raise RuntimeError(msg)

        if body is None:
            request = self._client.build_request("GET", self._url)
        else:
            request = self._client.build_request(
                "POST",
                self._url,
                content=body.encode(CHARSET),
                headers={"Content-Type": FORM_CONTENT_TYPE},
            )

        try:
            self._response = self._client.send(request, stream=True)
        except httpx.TransportError as e:
            msg = f"Could not reach server: {e}"
            raise PastebinConnectionError(msg, url=self._url) from e

    def receive(self) -> list[str]:
        """
        Read the whole response as text lines.

        Blocks until the server has sent everything. The response stream is
        released whether or not reading succeeds.

        Returns:
            Response lines without line terminators. May be empty.

        Raises:
            PastebinConnectionError: If the stream breaks while reading.
            RuntimeError: If nothing was sent yet.
        """
        if self._response is None:
            msg = "Nothing sent on this connection"
            raise RuntimeError(msg)

        response = self._response
        response.encoding = CHARSET
        try:
            return list(response.iter_lines())
        except httpx.TransportError as e:
            msg = f"Failed to read response: {e}"
            raise PastebinConnectionError(msg, url=self._url) from e
        finally:
            response.close()

    def close(self) -> None:
        if self._response is not None:
            self._response.close()
        self._client.close()


class HttpClient:
    """Synchronous HTTP client for the Pastebin API."""

    def __init__(
        self,
        config: PastebinConfig | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Args:
            config: Client configuration. Uses defaults if not provided.
            transport: Optional transport for testing (mock transport).
        """
        self._config = config or PastebinConfig()
        self._transport = transport

    @property
    def config(self) -> PastebinConfig:
        return self._config

    def open(self, url: str) -> Connection:
        """
        Open a connection for exactly one request.

        Args:
            url: Absolute URL of the endpoint.

        Raises:
            PastebinConnectionError: If the URL cannot be used.
        """
        try:
            target = httpx.URL(url)
        except httpx.InvalidURL as e:
            msg = f"Invalid endpoint URL: {e}"
            raise PastebinConnectionError(msg, url=url) from e
        if not target.host:
            msg = "Endpoint URL has no host"
            raise PastebinConnectionError(msg, url=url)

        client = httpx.Client(
            timeout=self._config.timeout,
            transport=self._transport,
            headers={
                "Accept-Charset": "UTF-8",
                "Cache-Control": "no-cache",
                "User-Agent": self._config.user_agent,
            },
        )
        logger.debug("Connection opened", url=url)
        return Connection(client, url)

    def query(self, connection: Connection, body: str) -> list[str]:
        """
        Send a POST body and return the validated response lines.

        Raises:
            PastebinConnectionError: If the exchange fails at the network level.
            EmptyResponseError: If the server sent nothing.
            APIRequestError: If the server rejected the request.
        """
        connection.send(body)
        lines = connection.receive()
        logger.debug("Response received", url=connection.url, lines=len(lines))

        validate_response(lines, endpoint=connection.url)

        status_code = connection.status_code
        if status_code is not None and httpx.codes.is_error(status_code):
            msg = f"HTTP {status_code}: {lines[0]}"
            raise APIRequestError(msg, endpoint=connection.url, status_code=status_code)
        return lines

    def post(self, url: str, parameters: Mapping[str, ParamValue]) -> list[str]:
        """
        Make an API request.

        Args:
            url: Endpoint URL.
            parameters: API fields; OMIT values are left out.

        Returns:
            Response lines.
        """
        logger.debug("Sending API request", url=url, params=sanitize_for_log(parameters))
        with self.open(url) as connection:
            return self.query(connection, encode(parameters))

    def get(self, url: str) -> list[str]:
        """
        Fetch a plain web page without any API validation.

        Raises:
            PastebinConnectionError: If the exchange fails at the network level.
            NotFoundError: If the page does not exist.
            APIRequestError: For other HTTP error statuses.
        """
        logger.debug("Fetching page", url=url)
        with self.open(url) as connection:
            connection.send()
            lines = connection.receive()
            status_code = connection.status_code

        if status_code == httpx.codes.NOT_FOUND:
            msg = "Page not found"
            raise NotFoundError(msg, paste_key=url.rsplit("/", 1)[-1])
        if status_code is not None and httpx.codes.is_error(status_code):
            msg = f"HTTP {status_code}"
            raise APIRequestError(msg, endpoint=url, status_code=status_code)
        return lines
