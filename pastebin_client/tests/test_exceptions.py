from pastebin_client.exceptions import (
    APIRequestError,
    EmptyResponseError,
    MalformedResponseError,
    NotFoundError,
    PastebinConnectionError,
    PastebinError,
)


def test_pastebin_error_str_without_context() -> None:
    error = PastebinError("Something failed")

    assert str(error) == "Something failed"


def test_pastebin_error_str_with_context() -> None:
    error = PastebinError("Failed", paste_key="K1", attempt=3)

    assert "Failed" in str(error)
    assert "paste_key='K1'" in str(error)
    assert "attempt=3" in str(error)


def test_all_errors_share_base() -> None:
    for error in (
        PastebinConnectionError("down"),
        EmptyResponseError(),
        APIRequestError("Bad API request, invalid api_option"),
        NotFoundError("missing", title="z"),
        MalformedResponseError("broken", field="key"),
    ):
        assert isinstance(error, PastebinError)


def test_api_request_error_str_is_server_text() -> None:
    error = APIRequestError(
        "Bad API request, invalid api_dev_key", endpoint="https://x", status_code=200
    )

    assert str(error) == "Bad API request, invalid api_dev_key"
    assert error.endpoint == "https://x"
    assert error.status_code == 200


def test_empty_response_error_default_message() -> None:
    assert str(EmptyResponseError()) == "No answer from the server"
    assert EmptyResponseError(endpoint="https://x").endpoint == "https://x"


def test_not_found_error_context() -> None:
    error = NotFoundError("No paste", title="z")

    assert error.title == "z"
    assert error.paste_key is None
    assert str(error) == "No paste (title='z')"


def test_malformed_response_error_field() -> None:
    assert MalformedResponseError("broken", field="hits").field == "hits"
    assert str(MalformedResponseError("broken")) == "broken"
