"""End-to-end tests of the client facade over a mock transport."""

import pytest

from pastebin_client import PastebinClient, PastebinContext
from pastebin_client.api.endpoints import LOGIN_URL, POST_URL, PUBLIC_RAW_URL
from pastebin_client.exceptions import APIRequestError, EmptyResponseError
from pastebin_client.models.paste import Visibility
from pastebin_client.tests.utils.mock_transport import MockTransport

SINGLE_RECORD = (
    "<paste><paste_key>K1</paste_key><paste_date>1600000000</paste_date>"
    "<paste_title>t</paste_title><paste_size>9</paste_size>"
    "<paste_expire_date>N</paste_expire_date><paste_private>2</paste_private>"
    "<paste_format_long>None</paste_format_long><paste_format_short>text</paste_format_short>"
    "<paste_url>https://pastebin.com/K1</paste_url><paste_hits>0</paste_hits></paste>"
)


@pytest.fixture
def client(mock_transport: MockTransport) -> PastebinClient:
    return PastebinClient(transport=mock_transport)


def test_login_create_list_scenario(
    client: PastebinClient, mock_transport: MockTransport
) -> None:
    mock_transport.add_lines("S1")
    mock_transport.add_lines("https://pastebin.com/K1")
    mock_transport.add_lines(SINGLE_RECORD)

    context = client.login("D1", "u", "p")
    url = context.create_paste("print(1)", "t", 2, "N", "text")
    pastes = context.list_pastes_parsed()

    assert isinstance(context, PastebinContext)
    assert context.user_key == "S1"
    assert url == "https://pastebin.com/K1"
    assert len(pastes) == 1
    assert pastes[0].key == "K1"
    assert pastes[0].size == 9
    assert pastes[0].visibility == Visibility.PRIVATE
    assert pastes[0].hits == 0

    login, create, listing = mock_transport.requests
    assert str(login.url) == LOGIN_URL
    assert str(create.url) == POST_URL
    assert mock_transport.form(1)["api_user_key"] == "S1"
    assert mock_transport.form(2) == {
        "api_dev_key": "D1",
        "api_user_key": "S1",
        "api_results_limit": "50",
        "api_option": "list",
    }


def test_login_rejected(
    client: PastebinClient, mock_transport: MockTransport
) -> None:
    mock_transport.add_lines("Bad API request, invalid api_dev_key")

    with pytest.raises(APIRequestError) as exc_info:
        client.login("bad", "u", "p")

    assert exc_info.value.message == "Bad API request, invalid api_dev_key"


def test_empty_response_on_any_endpoint(
    client: PastebinClient, mock_transport: MockTransport
) -> None:
    context = client.context("D1", "S1")

    for operation in (
        lambda: client.login("D1", "u", "p"),
        lambda: context.list_pastes(),
        lambda: context.delete_paste("K1"),
        lambda: context.fetch_private_raw("K1"),
    ):
        mock_transport.add_response("")
        with pytest.raises(EmptyResponseError):
            operation()


def test_create_anonymous_paste(
    client: PastebinClient, mock_transport: MockTransport
) -> None:
    mock_transport.add_lines("https://pastebin.com/A1")

    url = client.create_anonymous_paste("D1", "hello", paste_format="python")

    assert url == "https://pastebin.com/A1"
    assert mock_transport.form() == {
        "api_option": "paste",
        "api_dev_key": "D1",
        "api_paste_code": "hello",
        "api_paste_format": "python",
    }


def test_fetch_public_raw(
    client: PastebinClient, mock_transport: MockTransport
) -> None:
    mock_transport.add_lines("a", "b")

    assert client.fetch_public_raw("K1") == ["a", "b"]
    assert str(mock_transport.requests[0].url) == PUBLIC_RAW_URL + "K1"


def test_context_shares_http_client(client: PastebinClient) -> None:
    assert client.context("D1", "S1").http is client.http
