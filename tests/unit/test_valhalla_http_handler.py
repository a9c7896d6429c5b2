"""HTTPハンドラーのテスト"""
import json
from unittest.mock import Mock

import pytest

from valhalla_router.features.routing.providers.valhalla_http_handler import (
    RawResponse,
    ValhallaHttpHandler,
)
from valhalla_router.infrastructure.config.settings import Settings
from valhalla_router.shared.exceptions.errors import ConfigurationError, HTTPError

DOCUMENT = {
    "locations": [{"lat": 1.0, "lon": 2.0}, {"lat": 3.0, "lon": 4.0}],
    "costing": "auto",
}


def make_http_client(status_code: int = 200, text: str = "{}") -> Mock:
    client = Mock()
    response = Mock(status_code=status_code, text=text)
    client.post.return_value = response
    client.get.return_value = response
    return client


def test_post_request() -> None:
    client = make_http_client(200, '{"trip": {}}')
    handler = ValhallaHttpHandler("http://localhost:8002/", http_client=client)

    response = handler.request_route(DOCUMENT)

    assert response == RawResponse(status_code=200, body='{"trip": {}}')
    client.post.assert_called_once_with(
        "http://localhost:8002/route", json=DOCUMENT, params=None, raise_for_status=False
    )


def test_api_key_is_sent_as_query_parameter() -> None:
    client = make_http_client()
    handler = ValhallaHttpHandler("http://localhost:8002", api_key="secret", http_client=client)

    handler.request_route(DOCUMENT)

    assert client.post.call_args.kwargs["params"] == {"api_key": "secret"}


def test_get_request_puts_document_in_query() -> None:
    client = make_http_client()
    handler = ValhallaHttpHandler(
        "http://localhost:8002", api_key="secret", http_client=client, method="get"
    )

    handler.request_route(DOCUMENT)

    client.post.assert_not_called()
    args, kwargs = client.get.call_args
    assert args == ("http://localhost:8002/route",)
    assert json.loads(kwargs["params"]["json"]) == DOCUMENT
    assert kwargs["params"]["api_key"] == "secret"
    assert kwargs["raise_for_status"] is False


def test_error_status_is_returned_not_raised() -> None:
    handler = ValhallaHttpHandler("http://localhost:8002", http_client=make_http_client(500, ""))

    assert handler.request_route(DOCUMENT).status_code == 500


def test_transport_error_propagates() -> None:
    client = make_http_client()
    client.post.side_effect = HTTPError("timed out")
    handler = ValhallaHttpHandler("http://localhost:8002", http_client=client)

    with pytest.raises(HTTPError):
        handler.request_route(DOCUMENT)


@pytest.mark.parametrize("endpoint,method", [("", "POST"), ("http://localhost", "PUT")])
def test_invalid_configuration(endpoint: str, method: str) -> None:
    with pytest.raises(ConfigurationError):
        ValhallaHttpHandler(endpoint, http_client=make_http_client(), method=method)


def test_from_settings() -> None:
    settings = Settings(
        _env_file=None,
        valhalla_endpoint="http://valhalla.local",
        valhalla_api_key="key",
        valhalla_request_method="GET",
        http_timeout=7,
        http_user_agent="test-agent",
    )

    handler = ValhallaHttpHandler.from_settings(settings)

    assert handler.route_url == "http://valhalla.local/route"
    assert handler.api_key == "key"
    assert handler.method == "GET"
    assert handler.http_client.timeout == 7
    assert handler.http_client.session.headers["User-Agent"] == "test-agent"
    handler.close()
