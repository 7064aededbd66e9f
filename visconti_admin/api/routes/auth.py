"""
Session endpoints:
  GET  /                 – Redirect to the dashboard
  GET  /admin            – Redirect to the dashboard
  GET  /admin/login      – Login form (skipped when a token is already stored)
  POST /admin/login      – Exchange credentials for a token and store it
  POST /admin/logout     – Clear the token and every mounted view
"""
from fastapi import APIRouter, Depends, Form, Request
import logging

from pydantic import ValidationError

from visconti_admin.api.templating import redirect, render, safe_next
from visconti_admin.clients.api_client import ApiClient
from visconti_admin.core.dependencies import (
    get_api_client,
    get_credential_store,
    get_session_context,
    get_text,
    get_view_store,
)
from visconti_admin.core.exceptions import ApiError
from visconti_admin.core.i18n import Translator
from visconti_admin.core.session import CredentialStore, SessionContext
from visconti_admin.repositories.auth_repository import AuthRepository
from visconti_admin.schemas.auth import LoginRequest
from visconti_admin.services.navigation_service import HOME_PATH, LOGIN_PATH
from visconti_admin.services.view_state import ViewStateStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Session"])


@router.get("/", include_in_schema=False)
@router.get("/admin", include_in_schema=False)
def index():
    return redirect(HOME_PATH)


@router.get(LOGIN_PATH, summary="Login form")
def login_page(
    request: Request,
    next: str = "",
    session: SessionContext = Depends(get_session_context),
    t: Translator = Depends(get_text),
):
    """Show the login form, or go straight to the dashboard if already signed in."""
    if session.is_authenticated:
        return redirect(safe_next(next))
    return render(request, "login.html", t, next=next, error=None)


@router.post(LOGIN_PATH, summary="Sign in")
def login(
    request: Request,
    username: str = Form(""),
    password: str = Form(""),
    next: str = Form(""),
    client: ApiClient = Depends(get_api_client),
    store: CredentialStore = Depends(get_credential_store),
    t: Translator = Depends(get_text),
):
    """Post the credentials to the backend and persist the returned token."""
    logger.info("Login requested for username=%s", username)
    try:
        token = AuthRepository(client).login(
            LoginRequest(username=username, password=password)
        )
    except (ValidationError, ApiError):
        logger.warning("Login failed for username=%s", username, exc_info=True)
        return render(
            request, "login.html", t, status_code=401, next=next, error=t("login.failed")
        )
    store.write(token)
    response = redirect(safe_next(next))
    store.apply_to(response)
    return response


@router.post("/admin/logout", summary="Sign out")
def logout(
    session: SessionContext = Depends(get_session_context),
    store: CredentialStore = Depends(get_credential_store),
    views: ViewStateStore = Depends(get_view_store),
):
    """Remove the stored token and return to the login view."""
    logger.info("Logout requested")
    views.drop_session(session)
    store.clear()
    response = redirect(LOGIN_PATH)
    store.apply_to(response)
    return response
