"""
Dashboard and placeholder pages:
  GET /admin/dashboard   – Summary tiles (menu item count)
  GET /admin/settings    – Settings destination (no content yet)
"""
from fastapi import APIRouter, Depends, Request
import logging

from visconti_admin.api.templating import render
from visconti_admin.clients.api_client import ApiClient
from visconti_admin.core.dependencies import (
    get_api_client,
    get_text,
    get_view_store,
    require_session,
)
from visconti_admin.core.i18n import Translator
from visconti_admin.core.session import SessionContext
from visconti_admin.repositories.menu_repository import MenuRepository
from visconti_admin.services.dashboard_service import DashboardView
from visconti_admin.services.view_state import ViewStateStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["Dashboard"])


@router.get("/dashboard", summary="Dashboard")
def dashboard(
    request: Request,
    session: SessionContext = Depends(require_session),
    client: ApiClient = Depends(get_api_client),
    views: ViewStateStore = Depends(get_view_store),
    t: Translator = Depends(get_text),
):
    """Every visit remounts the view and fetches the menu once."""
    view = views.mount(
        session, DashboardView.NAME, lambda: DashboardView(MenuRepository(client), t)
    )
    return render(
        request, "dashboard.html", t, shell=views.shell(session), stats=view.stats()
    )


@router.get("/settings", summary="Settings")
def settings_page(
    request: Request,
    session: SessionContext = Depends(require_session),
    views: ViewStateStore = Depends(get_view_store),
    t: Translator = Depends(get_text),
):
    return render(request, "settings.html", t, shell=views.shell(session))
