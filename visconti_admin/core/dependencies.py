"""
FastAPI dependency injection helpers: API client, session guard, view states.
"""
from functools import lru_cache
import logging

from fastapi import Depends, Request

from visconti_admin.clients.api_client import ApiClient
from visconti_admin.core.config import settings
from visconti_admin.core.exceptions import LoginRequired
from visconti_admin.core.i18n import Translator, get_translator
from visconti_admin.core.session import (
    CookieCredentialStore,
    CredentialStore,
    SessionContext,
)
from visconti_admin.services.view_state import ViewStateStore

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Backend / shared state
# ---------------------------------------------------------------------------

@lru_cache
def get_api_client() -> ApiClient:
    """Return the process-wide client for the configured backend."""
    logger.info("Creating API client for %s", settings.BACKEND_URI)
    return ApiClient(settings.BACKEND_URI, timeout=settings.REQUEST_TIMEOUT)


@lru_cache
def get_view_store() -> ViewStateStore:
    return ViewStateStore(
        max_sessions=settings.VIEW_STORE_MAX_SESSIONS,
        idle_seconds=settings.SESSION_IDLE_SECONDS,
    )


def get_text() -> Translator:
    return get_translator()


# ---------------------------------------------------------------------------
# Session guard
# ---------------------------------------------------------------------------

def get_credential_store(request: Request) -> CredentialStore:
    """Token store bound to the current request's cookies."""
    return CookieCredentialStore(request, settings.TOKEN_COOKIE_NAME)


def get_session_context(
    store: CredentialStore = Depends(get_credential_store),
) -> SessionContext:
    return SessionContext(token=store.read())


def require_session(
    request: Request,
    session: SessionContext = Depends(get_session_context),
) -> SessionContext:
    """
    Guard for every administrative page: without a stored token the request
    is redirected to the login view before anything is rendered.
    """
    if not session.is_authenticated:
        logger.info("No session token, redirecting %s to login", request.url.path)
        raise LoginRequired(next_path=request.url.path)
    logger.trace("Session token present for %s", request.url.path)
    return session
