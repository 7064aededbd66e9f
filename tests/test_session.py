"""Tests for the session guard, credential stores and view-state registry."""
from starlette.requests import Request
from fastapi.responses import Response

from visconti_admin.core.exceptions import ApiStatusError
from visconti_admin.core.lifecycle import ViewLifecycle
from visconti_admin.core.session import CookieCredentialStore, SessionContext
from visconti_admin.services.view_state import ViewStateStore

from factories import FakeClock, grouped


def make_request(cookie: str = "") -> Request:
    headers = [(b"cookie", cookie.encode())] if cookie else []
    return Request({"type": "http", "method": "GET", "path": "/", "headers": headers})


class CountingView:
    def __init__(self):
        self.lifecycle = ViewLifecycle("counting")
        self.loads = 0

    def load(self):
        self.loads += 1


# ---------------------------------------------------------------------------
# Guard
# ---------------------------------------------------------------------------

def test_guest_is_sent_to_login(client, fake_api):
    response = client.get("/admin/menu", follow_redirects=False)

    assert response.status_code == 303
    assert response.headers["location"] == "/admin/login?next=%2Fadmin%2Fmenu"
    assert fake_api.calls == []


def test_stored_token_lets_content_render(client, fake_api, logged_in):
    fake_api.on("GET", "api/menu", grouped())

    response = client.get("/admin/menu")

    assert response.status_code == 200
    assert "Menu Management" in response.text


def test_login_page_skipped_with_token(client, logged_in):
    response = client.get("/admin/login", follow_redirects=False)

    assert response.status_code == 303
    assert response.headers["location"] == "/admin/dashboard"


def test_login_stores_token_and_follows_next(client, fake_api, credential_store):
    fake_api.on("POST", "api/admin/login", {"token": "fresh-token"})

    response = client.post(
        "/admin/login",
        data={"username": "admin", "password": "secret", "next": "/admin/offer"},
        follow_redirects=False,
    )

    assert response.status_code == 303
    assert response.headers["location"] == "/admin/offer"
    assert credential_store.read() == "fresh-token"
    assert fake_api.calls_to("POST", "api/admin/login")[0]["json"] == {
        "username": "admin",
        "password": "secret",
    }


def test_rejected_login_shows_error(client, fake_api, credential_store):
    fake_api.on("POST", "api/admin/login", error=ApiStatusError(401, "HTTP 401"))

    response = client.post("/admin/login", data={"username": "admin", "password": "bad"})

    assert response.status_code == 401
    assert "Login failed" in response.text
    assert credential_store.read() is None


def test_external_next_is_ignored(client, fake_api):
    fake_api.on("POST", "api/admin/login", {"token": "fresh-token"})

    response = client.post(
        "/admin/login",
        data={"username": "a", "password": "b", "next": "https://evil.test/"},
        follow_redirects=False,
    )

    assert response.headers["location"] == "/admin/dashboard"


def test_logout_clears_token_and_views(client, logged_in, view_store, session):
    view = view_store.mount(session, "counting", CountingView)

    response = client.post("/admin/logout", follow_redirects=False)

    assert response.headers["location"] == "/admin/login"
    assert logged_in.read() is None
    assert view_store.peek(session, "counting") is None
    assert not view.lifecycle.mounted


# ---------------------------------------------------------------------------
# Cookie store
# ---------------------------------------------------------------------------

def test_cookie_store_reads_existing_cookie():
    store = CookieCredentialStore(make_request("adminToken=abc"), "adminToken")
    assert store.read() == "abc"


def test_cookie_store_applies_staged_write():
    store = CookieCredentialStore(make_request(), "adminToken")
    response = Response()

    store.write("xyz")
    store.apply_to(response)

    assert store.read() == "xyz"
    assert "adminToken=xyz" in response.headers["set-cookie"]


def test_cookie_store_applies_staged_clear():
    store = CookieCredentialStore(make_request("adminToken=abc"), "adminToken")
    response = Response()

    store.clear()
    store.apply_to(response)

    assert store.read() is None
    assert response.headers["set-cookie"].startswith("adminToken=")
    assert "Max-Age=0" in response.headers["set-cookie"]


def test_cookie_store_leaves_response_alone_without_changes():
    store = CookieCredentialStore(make_request("adminToken=abc"), "adminToken")
    response = Response()

    store.apply_to(response)

    assert "set-cookie" not in response.headers


# ---------------------------------------------------------------------------
# View-state registry
# ---------------------------------------------------------------------------

def test_mount_replaces_and_unmounts_previous(view_store, session):
    first = view_store.mount(session, "counting", CountingView)
    second = view_store.mount(session, "counting", CountingView)

    assert first is not second
    assert not first.lifecycle.mounted
    assert second.lifecycle.mounted
    assert second.loads == 1


def test_get_reuses_mounted_view(view_store, session):
    first = view_store.get(session, "counting", CountingView)
    again = view_store.get(session, "counting", CountingView)

    assert first is again
    assert first.loads == 1


def test_sessions_do_not_share_state(view_store, session):
    other = SessionContext(token="other-token")
    mine = view_store.get(session, "counting", CountingView)
    theirs = view_store.get(other, "counting", CountingView)

    assert mine is not theirs
    view_store.shell(session).toggle_sidebar()
    assert view_store.shell(other).sidebar_open is True


def test_guard_then_token_then_render(client, fake_api, credential_store):
    fake_api.on("GET", "api/menu", grouped())
    assert client.get("/admin/dashboard", follow_redirects=False).status_code == 303

    credential_store.write("test-token")

    assert client.get("/admin/dashboard", follow_redirects=False).status_code == 200


def test_store_is_bounded_by_least_recent_use():
    store = ViewStateStore(max_sessions=3, idle_seconds=3600, clock=FakeClock())
    views = {}
    for i in range(1000):
        session = SessionContext(token=f"token-{i}")
        views[i] = store.get(session, "counting", CountingView)

    assert len(store) == 3
    assert not views[0].lifecycle.mounted
    assert views[999].lifecycle.mounted
    assert store.peek(SessionContext(token="token-0"), "counting") is None


def test_recent_use_protects_a_session_from_eviction():
    store = ViewStateStore(max_sessions=2, idle_seconds=3600, clock=FakeClock())
    first = SessionContext(token="first")
    kept = store.get(first, "counting", CountingView)
    store.get(SessionContext(token="second"), "counting", CountingView)

    store.shell(first)
    store.get(SessionContext(token="third"), "counting", CountingView)

    assert store.peek(first, "counting") is kept
    assert store.peek(SessionContext(token="second"), "counting") is None


def test_idle_sessions_are_evicted_and_unmounted():
    clock = FakeClock()
    store = ViewStateStore(max_sessions=100, idle_seconds=60, clock=clock)
    idle = SessionContext(token="idle")
    stale = store.get(idle, "counting", CountingView)

    clock.advance(61)
    store.get(SessionContext(token="active"), "counting", CountingView)

    assert len(store) == 1
    assert not stale.lifecycle.mounted

    again = store.get(idle, "counting", CountingView)
    assert again is not stale
    assert again.loads == 1
