"""
Paste-related domain models.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import IntEnum, StrEnum


class Visibility(IntEnum):
    """Who can discover a paste."""

    PUBLIC = 0
    UNLISTED = 1
    PRIVATE = 2


class ExpireDate(StrEnum):
    """Expiration values accepted by the API."""

    NEVER = "N"
    TEN_MINUTES = "10M"
    ONE_HOUR = "1H"
    ONE_DAY = "1D"
    ONE_WEEK = "1W"
    TWO_WEEKS = "2W"
    ONE_MONTH = "1M"
    SIX_MONTHS = "6M"
    ONE_YEAR = "1Y"


@dataclass(frozen=True, kw_only=True)
class Paste:
    """
    Metadata of a paste, as returned by the list operation.

    Does not include the paste contents; fetch those with the raw operations.

    Attributes:
        key: Unique paste identifier.
        date: Creation time as Unix epoch seconds.
        title: Paste title (empty for untitled pastes).
        size: Content size in bytes.
        expire_date: Expiration descriptor as sent by the server.
        visibility: Public, unlisted or private.
        format_long: Human-readable syntax highlighting name.
        format_short: Syntax highlighting identifier (e.g. "text").
        url: Canonical URL of the paste.
        hits: View count.
    """

    key: str
    date: int
    title: str
    size: int
    expire_date: str
    visibility: Visibility
    format_long: str
    format_short: str
    url: str
    hits: int

    @property
    def created_at(self) -> datetime:
        """Creation time as a UTC datetime."""
        return datetime.fromtimestamp(self.date, tz=timezone.utc)

    @property
    def is_public(self) -> bool:
        return self.visibility == Visibility.PUBLIC

    @property
    def is_private(self) -> bool:
        return self.visibility == Visibility.PRIVATE


@dataclass(frozen=True, slots=True)
class Found:
    """Title lookup hit."""

    paste: Paste


@dataclass(frozen=True, slots=True)
class Missing:
    """Title lookup miss."""

    title: str


PasteLookup = Found | Missing
