"""Shared fixtures: a canned backend, an in-memory token store, a test app."""
import os
import tempfile

os.environ.setdefault(
    "LOG_FILE_PATH", os.path.join(tempfile.gettempdir(), "visconti-admin-tests.log")
)
os.environ.setdefault("BACKEND_URI", "http://backend.test/")

import pytest
from fastapi.testclient import TestClient

from visconti_admin.core import logging_config  # noqa: F401 – installs Logger.trace
from visconti_admin.core.dependencies import (
    get_api_client,
    get_credential_store,
    get_view_store,
)
from visconti_admin.core.i18n import Translator
from visconti_admin.core.session import InMemoryCredentialStore, SessionContext
from visconti_admin.main import app
from visconti_admin.services.view_state import ViewStateStore

from factories import FakeApiClient, FakeClock


@pytest.fixture
def fake_api():
    return FakeApiClient()


@pytest.fixture
def t():
    return Translator("en")


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def credential_store():
    return InMemoryCredentialStore()


@pytest.fixture
def view_store():
    return ViewStateStore()


@pytest.fixture
def session():
    return SessionContext(token="test-token")


@pytest.fixture
def client(fake_api, credential_store, view_store):
    app.dependency_overrides[get_api_client] = lambda: fake_api
    app.dependency_overrides[get_credential_store] = lambda: credential_store
    app.dependency_overrides[get_view_store] = lambda: view_store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def logged_in(credential_store):
    credential_store.write("test-token")
    return credential_store
