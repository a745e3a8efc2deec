"""
Pastebin API client layer.

Provides synchronous HTTP communication with the Pastebin API.
"""

from pastebin_client.api.http_client import (
    Connection,
    HttpClient,
    sanitize_for_log,
    validate_response,
)

__all__ = ["Connection", "HttpClient", "sanitize_for_log", "validate_response"]
