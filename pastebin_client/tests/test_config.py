import pytest

from pastebin_client.config import PastebinConfig


def test_defaults() -> None:
    config = PastebinConfig()

    assert config.timeout is None
    assert config.default_results_limit == 50
    assert config.user_agent


@pytest.mark.parametrize(
    "kwargs",
    [
        {"timeout": 0},
        {"timeout": -1.0},
        {"user_agent": ""},
        {"default_results_limit": 0},
        {"default_results_limit": 1001},
    ],
)
def test_invalid_values_rejected(kwargs: dict) -> None:
    with pytest.raises(ValueError):
        PastebinConfig(**kwargs)


def test_keyword_only() -> None:
    with pytest.raises(TypeError):
        PastebinConfig(10.0)  # type: ignore[misc]
