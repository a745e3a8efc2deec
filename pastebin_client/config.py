"""
Pastebin client configuration.
"""

from dataclasses import dataclass

MIN_RESULTS_LIMIT = 1
MAX_RESULTS_LIMIT = 1000


@dataclass(frozen=True, kw_only=True)
class PastebinConfig:
    """
    Attributes:
        timeout: Request timeout in seconds. None blocks until the server answers.
        user_agent: User-Agent header value.
        default_results_limit: Number of pastes requested by list operations
            when the caller does not pass a limit.
    """

    timeout: float | None = None
    user_agent: str = "pastebin-client-python/0.1.0"
    default_results_limit: int = 50

    def __post_init__(self) -> None:
        if self.timeout is not None and self.timeout <= 0:
            msg = "timeout must be positive"
            raise ValueError(msg)
        if not self.user_agent:
            msg = "user_agent must not be empty"
            raise ValueError(msg)
        if not MIN_RESULTS_LIMIT <= self.default_results_limit <= MAX_RESULTS_LIMIT:
            msg = (
                f"default_results_limit must be between {MIN_RESULTS_LIMIT} and {MAX_RESULTS_LIMIT}"
            )
            raise ValueError(msg)
