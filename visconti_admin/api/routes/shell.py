"""
Shell endpoints (sidebar state):
  POST /admin/shell/sidebar          – Collapse/expand the desktop sidebar
  POST /admin/shell/mobile-sidebar   – Open/close the mobile overlay
  GET  /admin/shell/navigate         – Follow a mobile nav entry and close the overlay
"""
from fastapi import APIRouter, Depends, Form
import logging

from visconti_admin.api.templating import redirect, safe_next
from visconti_admin.core.dependencies import get_view_store, require_session
from visconti_admin.core.session import SessionContext
from visconti_admin.services.navigation_service import HOME_PATH, is_navigation_target
from visconti_admin.services.view_state import ViewStateStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin/shell", tags=["Shell"])


@router.post("/sidebar", summary="Toggle the desktop sidebar")
def toggle_sidebar(
    next: str = Form(""),
    session: SessionContext = Depends(require_session),
    views: ViewStateStore = Depends(get_view_store),
):
    views.shell(session).toggle_sidebar()
    return redirect(safe_next(next))


@router.post("/mobile-sidebar", summary="Open or close the mobile sidebar")
def mobile_sidebar(
    action: str = Form("close"),
    next: str = Form(""),
    session: SessionContext = Depends(require_session),
    views: ViewStateStore = Depends(get_view_store),
):
    shell = views.shell(session)
    if action == "open":
        shell.open_mobile()
    else:
        shell.close_mobile()
    return redirect(safe_next(next))


@router.get("/navigate", summary="Navigate from the mobile sidebar")
def navigate(
    to: str = HOME_PATH,
    session: SessionContext = Depends(require_session),
    views: ViewStateStore = Depends(get_view_store),
):
    views.shell(session).close_mobile()
    if not is_navigation_target(to):
        logger.warning("Unknown navigation target %s", to)
        to = HOME_PATH
    return redirect(to)
