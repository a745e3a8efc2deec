import os

import pytest

_ENV_VARS = ("PASTEBIN_TEST_DEV_KEY", "PASTEBIN_TEST_USERNAME", "PASTEBIN_TEST_PASSWORD")


def pytest_collection_modifyitems(config: pytest.Config, items: list) -> None:
    missing = not all(os.getenv(name) for name in _ENV_VARS)
    if not missing:
        return
    mark_expr = getattr(config.option, "markexpr", "")
    if "integration" in mark_expr:
        return
    skip = pytest.mark.skip(reason=" / ".join(_ENV_VARS) + " not set")
    for item in items:
        if item.get_closest_marker("integration"):
            item.add_marker(skip)


@pytest.fixture(scope="session")
def pastebin_credentials() -> tuple[str, str, str]:
    dev_key, username, password = (os.getenv(name) for name in _ENV_VARS)
    if not dev_key or not username or not password:
        pytest.fail(", ".join(_ENV_VARS) + " must be set to run integration tests.")
    return dev_key, username, password
