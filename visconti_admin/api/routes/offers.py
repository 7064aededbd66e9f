"""
Offer badge pages:
  GET  /admin/offer                   – Form and list of badges
  POST /admin/offer                   – Create a badge
  GET  /admin/offer/{badge_id}/delete – Ask for delete confirmation
  POST /admin/offer/delete            – Answer the delete confirmation
"""
import logging

from fastapi import APIRouter, Depends, Form, Request

from visconti_admin.api.templating import is_navigation, redirect, render
from visconti_admin.clients.api_client import ApiClient
from visconti_admin.core.dependencies import (
    get_api_client,
    get_text,
    get_view_store,
    require_session,
)
from visconti_admin.core.i18n import Translator
from visconti_admin.core.session import SessionContext
from visconti_admin.repositories.offer_badge_repository import OfferBadgeRepository
from visconti_admin.services.offer_badge_service import OfferBadgeView
from visconti_admin.services.view_state import ViewStateStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin/offer", tags=["Offers"])

OFFER_PATH = "/admin/offer"


def _factory(client: ApiClient):
    return lambda: OfferBadgeView(OfferBadgeRepository(client))


def _view(session, views, client) -> OfferBadgeView:
    return views.get(session, OfferBadgeView.NAME, _factory(client))


def _render(request, view, views, session, t):
    return render(request, "offers.html", t, shell=views.shell(session), view=view)


@router.get("", summary="Offer badges")
def list_badges(
    request: Request,
    session: SessionContext = Depends(require_session),
    client: ApiClient = Depends(get_api_client),
    views: ViewStateStore = Depends(get_view_store),
    t: Translator = Depends(get_text),
):
    if is_navigation(request):
        view = views.mount(session, OfferBadgeView.NAME, _factory(client))
    else:
        view = _view(session, views, client)
    return _render(request, view, views, session, t)


@router.post("", summary="Create an offer badge")
def create_badge(
    request: Request,
    title: str = Form(""),
    description: str = Form(""),
    discount: str = Form(""),
    expiry_date: str = Form(""),
    session: SessionContext = Depends(require_session),
    client: ApiClient = Depends(get_api_client),
    views: ViewStateStore = Depends(get_view_store),
    t: Translator = Depends(get_text),
):
    """Title, discount and expiry date are required; description is optional."""
    view = _view(session, views, client)
    values = {
        "title": title,
        "description": description,
        "discount": discount,
        "expiry_date": expiry_date,
    }
    if view.submit(values):
        return redirect(OFFER_PATH, keep=1)
    return _render(request, view, views, session, t)


@router.get("/{badge_id}/delete", summary="Confirm deletion")
def confirm_delete_page(
    badge_id: str,
    request: Request,
    session: SessionContext = Depends(require_session),
    client: ApiClient = Depends(get_api_client),
    views: ViewStateStore = Depends(get_view_store),
    t: Translator = Depends(get_text),
):
    view = _view(session, views, client)
    if not view.request_delete(badge_id):
        return redirect(OFFER_PATH, keep=1)
    badge = next(b for b in view.badges if b.id == badge_id)
    return render(
        request,
        "confirm.html",
        t,
        shell=views.shell(session),
        question=t("offers.confirm_delete"),
        subject=badge.title,
        action=f"{OFFER_PATH}/delete",
    )


@router.post("/delete", summary="Delete an offer badge")
def delete_badge(
    confirm: str = Form("no"),
    session: SessionContext = Depends(require_session),
    client: ApiClient = Depends(get_api_client),
    views: ViewStateStore = Depends(get_view_store),
):
    view = _view(session, views, client)
    view.confirm_delete(confirm == "yes")
    return redirect(OFFER_PATH, keep=1)
