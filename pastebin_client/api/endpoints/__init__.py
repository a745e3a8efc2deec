"""
Pastebin API endpoint definitions.
"""

from enum import StrEnum

POST_URL = "https://pastebin.com/api/api_post.php"
LOGIN_URL = "https://pastebin.com/api/api_login.php"
PRIVATE_RAW_URL = "https://pastebin.com/api/api_raw.php"

# Not part of the API: the public raw view page, suffixed with the paste key.
PUBLIC_RAW_URL = "https://pastebin.com/raw/"


class ApiOption(StrEnum):
    """Values of the api_option field."""

    PASTE = "paste"
    LIST = "list"
    DELETE = "delete"
    SHOW_PASTE = "show_paste"


__all__ = ["ApiOption", "LOGIN_URL", "POST_URL", "PRIVATE_RAW_URL", "PUBLIC_RAW_URL"]
