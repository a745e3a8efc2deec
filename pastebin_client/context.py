"""
Credential bundle for a logged-in Pastebin user.
"""

from dataclasses import dataclass, field

from pastebin_client.api.endpoints import pastes
from pastebin_client.api.http_client import HttpClient
from pastebin_client.models.paste import ExpireDate, Paste, Visibility


@dataclass(frozen=True)
class PastebinContext:
    """
    Bundles a developer key and a user key so operations don't need them.

    The user key only changes when a new one is requested from the server,
    so a context can be created once per session. Several devices sharing an
    account should share one user key rather than each logging in.

    Attributes:
        dev_key: API developer key.
        user_key: User session key.
        http: HTTP client used for every request.
    """

    dev_key: str = field(repr=False)
    user_key: str = field(repr=False)
    http: HttpClient = field(default_factory=HttpClient, repr=False, compare=False)

    def create_paste(
        self,
        code: str,
        name: str | None = None,
        visibility: Visibility | int | None = None,
        expire_date: str | None = None,
        paste_format: str | None = None,
    ) -> str:
        """See pastes.create_paste. The paste is owned by this user."""
        return pastes.create_paste(
            self.http,
            self.dev_key,
            code,
            name,
            visibility,
            expire_date,
            paste_format,
            self.user_key,
        )

    def create_private_paste(self, code: str, name: str) -> str:
        """Create a private, never-expiring paste in "text" format."""
        return self.create_paste(code, name, Visibility.PRIVATE, ExpireDate.NEVER, "text")

    def list_pastes(self, results_limit: int | None = None) -> list[str]:
        return pastes.list_pastes(self.http, self.dev_key, self.user_key, results_limit)

    def list_pastes_parsed(self, results_limit: int | None = None) -> list[Paste]:
        return pastes.list_pastes_parsed(self.http, self.dev_key, self.user_key, results_limit)

    def delete_paste(self, paste_key: str) -> list[str]:
        return pastes.delete_paste(self.http, self.dev_key, self.user_key, paste_key)

    def delete_paste_by_name(self, paste_name: str) -> list[str]:
        return pastes.delete_paste_by_name(self.http, self.dev_key, self.user_key, paste_name)

    def fetch_private_raw(self, paste_key: str) -> list[str]:
        return pastes.fetch_private_raw(self.http, self.dev_key, self.user_key, paste_key)

    def fetch_public_raw(self, paste_key: str) -> list[str]:
        """Needs neither key; here for continuity."""
        return pastes.fetch_public_raw(self.http, paste_key)

    def fetch_raw_by_name(self, paste_name: str) -> list[str]:
        return pastes.fetch_raw_by_name(self.http, self.dev_key, self.user_key, paste_name)
