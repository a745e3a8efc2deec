"""
Pastebin API request parameters.

Maps domain values to their wire field names and encodes parameter sets
into the form body expected by the API.
"""

from collections.abc import Mapping
from enum import Enum
from typing import Final
from urllib.parse import quote_plus


class _Omit(Enum):
    OMIT = "OMIT"

    def __repr__(self) -> str:
        return "OMIT"


OMIT: Final = _Omit.OMIT
"""Parameter value meaning "leave this field out of the request"."""

ParamValue = str | _Omit
Param = tuple[str, ParamValue]


def encode(parameters: Mapping[str, ParamValue]) -> str:
    """
    Encode parameters as ``name1=value1&name2=value2``.

    Entries whose value is OMIT are skipped entirely. Values are
    form-encoded; iteration follows the mapping's insertion order.

    Args:
        parameters: Field name to value.

    Returns:
        POST body without a trailing separator.
    """
    return "&".join(
        f"{name}={quote_plus(value)}" for name, value in parameters.items() if value is not OMIT
    )


def _param(field: str, value: object | None) -> Param:
    if value is None:
        return field, OMIT
    return field, str(value)


def option(value: str) -> Param:
    return _param("api_option", value)


def dev_key(value: str | None) -> Param:
    return _param("api_dev_key", value)


def username(value: str | None) -> Param:
    return _param("api_user_name", value)


def password(value: str | None) -> Param:
    return _param("api_user_password", value)


def code(value: str | None) -> Param:
    return _param("api_paste_code", value)


def visibility(value: int | None) -> Param:
    return _param("api_paste_private", None if value is None else int(value))


def name(value: str | None) -> Param:
    return _param("api_paste_name", value)


def expire_date(value: str | None) -> Param:
    return _param("api_expire_date", value)


def paste_format(value: str | None) -> Param:
    return _param("api_paste_format", value)


def user_key(value: str | None) -> Param:
    return _param("api_user_key", value)


def results_limit(value: int | None) -> Param:
    return _param("api_results_limit", value)


def paste_key(value: str | None) -> Param:
    return _param("api_paste_key", value)
