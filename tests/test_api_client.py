"""Tests for the HTTP wrapper and response parsing."""
import json

import pytest
import requests

from visconti_admin.clients.api_client import ApiClient, join_url, parse
from visconti_admin.core.exceptions import (
    ApiResponseError,
    ApiStatusError,
    ApiTransportError,
)
from visconti_admin.repositories.menu_repository import MenuRepository
from visconti_admin.schemas.menu import GroupedMenuResponse, MenuItemForm

from factories import menu_item, png_file


class StubResponse:
    def __init__(self, status_code=200, body=None, raw=None):
        self.status_code = status_code
        if raw is not None:
            self.content = raw
        else:
            self.content = b"" if body is None else json.dumps(body).encode()

    def json(self):
        return json.loads(self.content)


class CapturingAdapter(requests.adapters.BaseAdapter):
    """Transport that records the prepared request and answers with JSON."""

    def __init__(self, body):
        super().__init__()
        self.body = body
        self.sent = []

    def send(self, request, **kwargs):
        self.sent.append(request)
        response = requests.Response()
        response.status_code = 200
        response.headers["Content-Type"] = "application/json"
        response._content = json.dumps(self.body).encode()
        response.request = request
        response.url = request.url
        return response

    def close(self):
        pass


def wired_client(body):
    adapter = CapturingAdapter(body)
    session = requests.Session()
    session.mount("http://", adapter)
    return ApiClient("http://backend.test/", session=session), adapter


class StubSession:
    def __init__(self, response=None, error=None):
        self.headers = {}
        self.response = response
        self.error = error
        self.sent = []

    def request(self, method, url, **kwargs):
        self.sent.append((method, url, kwargs))
        if self.error is not None:
            raise self.error
        return self.response


@pytest.mark.parametrize(
    "base, path, expected",
    [
        ("http://localhost:5000/", "api/menu", "http://localhost:5000/api/menu"),
        ("http://localhost:5000", "api/menu", "http://localhost:5000/api/menu"),
        ("http://localhost:5000/", "/api/images/7", "http://localhost:5000/api/images/7"),
    ],
)
def test_join_url_uses_a_single_slash(base, path, expected):
    assert join_url(base, path) == expected


def test_get_returns_decoded_json():
    session = StubSession(StubResponse(200, [{"_id": "1"}]))
    client = ApiClient("http://backend.test/", session=session)

    assert client.get("api/offer-badges") == [{"_id": "1"}]
    method, url, kwargs = session.sent[0]
    assert (method, url) == ("GET", "http://backend.test/api/offer-badges")
    assert kwargs == {"timeout": None}


def test_post_forwards_only_the_parts_given():
    session = StubSession(StubResponse(201, {"_id": "9"}))
    client = ApiClient("http://backend.test/", timeout=5, session=session)

    client.post("api/menu", files={"name": (None, "Margherita")})

    _, _, kwargs = session.sent[0]
    assert kwargs == {"timeout": 5, "files": {"name": (None, "Margherita")}}


def test_empty_body_returns_none():
    session = StubSession(StubResponse(204))
    client = ApiClient("http://backend.test/", session=session)

    assert client.delete("api/menu/1") is None


def test_error_status_carries_server_message():
    session = StubSession(StubResponse(400, {"message": "Image too large"}))
    client = ApiClient("http://backend.test/", session=session)

    with pytest.raises(ApiStatusError) as exc_info:
        client.post("api/images", files={"image": ("a.png", b"x", "image/png")})

    assert exc_info.value.status_code == 400
    assert exc_info.value.server_message == "Image too large"


def test_error_status_without_json_body():
    session = StubSession(StubResponse(500, raw=b"<html>boom</html>"))
    client = ApiClient("http://backend.test/", session=session)

    with pytest.raises(ApiStatusError) as exc_info:
        client.get("api/menu")

    assert exc_info.value.server_message is None


def test_transport_failure_is_wrapped():
    session = StubSession(error=requests.ConnectionError("refused"))
    client = ApiClient("http://backend.test/", session=session)

    with pytest.raises(ApiTransportError):
        client.get("api/menu")


def test_non_json_success_body_is_rejected():
    session = StubSession(StubResponse(200, raw=b"not json"))
    client = ApiClient("http://backend.test/", session=session)

    with pytest.raises(ApiResponseError):
        client.get("api/menu")


def test_parse_rejects_a_flat_list_where_groups_are_expected():
    with pytest.raises(ApiResponseError):
        parse([{"_id": "1"}], GroupedMenuResponse)


def test_update_without_image_is_still_multipart():
    client, adapter = wired_client(menu_item("1", "Margherita"))
    form = MenuItemForm(
        name="Margherita", description="Classic", price="7.50", category="pizze-tradizionali"
    )

    MenuRepository(client).update("1", form, None)

    sent = adapter.sent[0]
    assert sent.method == "PUT"
    assert sent.url == "http://backend.test/api/menu/1"
    assert sent.headers["Content-Type"].startswith("multipart/form-data")
    assert b'name="price"\r\n\r\n7.50' in sent.body
    assert b'name="image"' not in sent.body


def test_create_with_image_adds_the_file_part():
    client, adapter = wired_client(menu_item("2", "Diavola"))
    form = MenuItemForm(name="Diavola", description="Spicy", price="9", category="pizze-speciali")

    MenuRepository(client).create(form, png_file("diavola.png"))

    sent = adapter.sent[0]
    assert sent.headers["Content-Type"].startswith("multipart/form-data")
    assert b'name="category"\r\n\r\npizze-speciali' in sent.body
    assert b'name="image"; filename="diavola.png"' in sent.body
