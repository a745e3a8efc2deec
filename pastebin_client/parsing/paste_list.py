"""
Parser for the paste-list response.

The list operation answers with a pseudo-XML stream, one record per paste:

    <paste>
    <paste_key>K1</paste_key>
    <paste_date>1600000000</paste_date>
    ...
    </paste>

This is deliberately not an XML parser. It assumes flat records and
single-line elements without attributes; nested elements, attributes or
element content spanning several lines are not supported and will yield
wrong fields or a MalformedResponseError. A whole record written on one
line is accepted, as long as each element carries its closing tag.

Element content runs from the first ``>`` to the next ``<``, so
``<paste_title>a<b</paste_title>`` gives the title ``a``; whatever follows
inside the element is ignored and never read as another field.
"""

import re
from collections.abc import Iterable
from enum import Enum, auto

import structlog

from pastebin_client.exceptions import MalformedResponseError
from pastebin_client.models.paste import Paste, Visibility

logger = structlog.get_logger(__name__)

_RECORD_START = "<paste>"
_RECORD_END = "</paste>"

# A record marker, or one element running from its opening tag to the matching
# closing tag (or the end of the line). Markup inside the content stays part of
# the element.
_TOKEN = re.compile(r"</?paste>|<([^<>/][^<>]*)>.*?(?:</\1>|$)")

_REQUIRED_FIELDS = (
    "key",
    "date",
    "title",
    "size",
    "expire_date",
    "private",
    "url",
    "hits",
    "format_long",
    "format_short",
)


class ParserState(Enum):
    AWAITING_RECORD = auto()
    IN_RECORD = auto()
    RECORD_COMPLETE = auto()


def parse_paste_list(lines: Iterable[str]) -> list[Paste]:
    """
    Parse a paste-list response.

    Args:
        lines: Response lines as returned by the list operation.

    Returns:
        Pastes in response order. Empty if the response holds no records
        (e.g. "No pastes found.").

    Raises:
        MalformedResponseError: If a record is incomplete or has invalid values.
    """
    parser = PasteListParser()
    for line in lines:
        parser.feed_line(line)
    pastes = parser.finish()

    logger.debug("Paste list parsed", count=len(pastes))
    return pastes


class PasteListParser:
    """Incremental paste-list parser, fed one physical line at a time."""

    def __init__(self) -> None:
        self.state = ParserState.AWAITING_RECORD
        self._fields: dict[str, str] = {}
        self._pastes: list[Paste] = []

    def feed_line(self, line: str) -> None:
        for match in _TOKEN.finditer(line.strip()):
            self._feed_token(match.group(0))

    def finish(self) -> list[Paste]:
        """
        Returns:
            Every paste completed so far.

        Raises:
            MalformedResponseError: If the input ended inside a record.
        """
        if self.state is ParserState.IN_RECORD:
            msg = "Response ended inside a paste record"
            raise MalformedResponseError(msg)
        return list(self._pastes)

    def _feed_token(self, token: str) -> None:
        if token == _RECORD_START:
            # A second start marker discards the unterminated record.
            self._fields = {}
            self.state = ParserState.IN_RECORD
            return

        if token == _RECORD_END:
            if self.state is not ParserState.IN_RECORD:
                msg = "Paste record closed without being opened"
                raise MalformedResponseError(msg)
            fields, self._fields = self._fields, {}
            self.state = ParserState.RECORD_COMPLETE
            self._pastes.append(_build_paste(fields))
            return

        if self.state is ParserState.IN_RECORD:
            field = element_name(token)
            self._fields[field] = element_content(token)


def element_name(element: str) -> str:
    """
    Bare field name of an element: the opening tag after its first underscore.

    ``<paste_format_long>...`` gives ``format_long``.
    """
    opening_tag = element.split(">", 1)[0]
    _, separator, name = opening_tag.partition("_")
    return name if separator else ""


def element_content(element: str) -> str:
    """Text between the first ``>`` and the next ``<``; empty when absent."""
    _, separator, rest = element.partition(">")
    if not separator:
        return ""
    return rest.split("<", 1)[0]


def _build_paste(fields: dict[str, str]) -> Paste:
    for field in _REQUIRED_FIELDS:
        if field not in fields:
            msg = f"Paste record is missing field '{field}'"
            raise MalformedResponseError(msg, field=field)

    private = _int_field(fields, "private")
    try:
        visibility = Visibility(private)
    except ValueError as e:
        msg = f"Unknown visibility level {private}"
        raise MalformedResponseError(msg, field="private") from e

    return Paste(
        key=fields["key"],
        date=_int_field(fields, "date"),
        title=fields["title"],
        size=_int_field(fields, "size"),
        expire_date=fields["expire_date"],
        visibility=visibility,
        format_long=fields["format_long"],
        format_short=fields["format_short"],
        url=fields["url"],
        hits=_int_field(fields, "hits"),
    )


def _int_field(fields: dict[str, str], field: str) -> int:
    value = fields[field]
    try:
        return int(value)
    except ValueError as e:
        msg = f"Field '{field}' is not an integer: {value!r}"
        raise MalformedResponseError(msg, field=field) from e
