"""
Domain models for the Pastebin client.

These are immutable (frozen) dataclasses representing the core domain concepts.
"""

from pastebin_client.models.paste import (
    ExpireDate,
    Found,
    Missing,
    Paste,
    PasteLookup,
    Visibility,
)

__all__ = [
    "ExpireDate",
    "Found",
    "Missing",
    "Paste",
    "PasteLookup",
    "Visibility",
]
