"""HTTPクライアントのテスト"""
from unittest.mock import Mock

import pytest
import requests

from valhalla_router.shared.exceptions.errors import HTTPError
from valhalla_router.shared.http.client import DEFAULT_USER_AGENT, HTTPClient


def make_response(status_code: int) -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    response._content = b"{}"
    response.url = "http://localhost/route"
    return response


@pytest.fixture
def client() -> HTTPClient:
    client = HTTPClient(timeout=3)
    client.session = Mock()
    return client


def test_default_headers() -> None:
    with HTTPClient() as client:
        assert client.session.headers["User-Agent"] == DEFAULT_USER_AGENT
        assert client.session.headers["Accept"] == "application/json"


def test_retries_disabled() -> None:
    with HTTPClient() as client:
        adapter = client.session.get_adapter("https://example.com")
        assert adapter.max_retries.total == 0


def test_post_passes_timeout(client: HTTPClient) -> None:
    client.session.post.return_value = make_response(200)

    client.post("http://localhost/route", json={"a": 1})

    client.session.post.assert_called_once_with(
        "http://localhost/route", json={"a": 1}, params=None, headers=None, timeout=3
    )


def test_post_error_status_raises_with_status_code(client: HTTPClient) -> None:
    client.session.post.return_value = make_response(503)

    with pytest.raises(HTTPError) as exc_info:
        client.post("http://localhost/route")

    assert exc_info.value.status_code == 503


def test_post_error_status_returned_when_not_raising(client: HTTPClient) -> None:
    client.session.post.return_value = make_response(404)

    response = client.post("http://localhost/route", raise_for_status=False)

    assert response.status_code == 404


def test_get_connection_error_has_no_status_code(client: HTTPClient) -> None:
    client.session.get.side_effect = requests.ConnectionError("refused")

    with pytest.raises(HTTPError) as exc_info:
        client.get("http://localhost/route")

    assert exc_info.value.status_code is None
