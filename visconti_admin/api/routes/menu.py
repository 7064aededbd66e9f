"""
Menu management pages:
  GET  /admin/menu                  – List (query: category, page)
  GET  /admin/menu/new              – Open the empty form
  GET  /admin/menu/{item_id}/edit   – Open the form on an existing item
  POST /admin/menu/form             – Submit the form (create or update)
  POST /admin/menu/form/cancel      – Close the form, discarding the draft
  GET  /admin/menu/{item_id}/delete – Ask for delete confirmation
  POST /admin/menu/delete           – Answer the delete confirmation
"""
from typing import Optional
import logging

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile

from visconti_admin.api.templating import is_navigation, redirect, render
from visconti_admin.api.uploads import read_upload
from visconti_admin.clients.api_client import ApiClient
from visconti_admin.core.config import settings
from visconti_admin.core.dependencies import (
    get_api_client,
    get_text,
    get_view_store,
    require_session,
)
from visconti_admin.core.i18n import Translator
from visconti_admin.core.session import SessionContext
from visconti_admin.repositories.menu_repository import MenuRepository
from visconti_admin.schemas.menu import ALL_CATEGORIES, category_label
from visconti_admin.services.menu_service import MenuManagementView, category_choices
from visconti_admin.services.view_state import ViewStateStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin/menu", tags=["Menu"])

MENU_PATH = "/admin/menu"


def _factory(client: ApiClient):
    return lambda: MenuManagementView(MenuRepository(client), settings.MENU_PAGE_SIZE)


def _view(session, views, client) -> MenuManagementView:
    return views.get(session, MenuManagementView.NAME, _factory(client))


def _list_redirect(view: MenuManagementView):
    return redirect(MENU_PATH, category=view.filter_category, page=view.pagination.page)


def _page_number(raw: Optional[str]) -> Optional[int]:
    """Parse the page query value; anything non-numeric keeps the current cursor."""
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring invalid page value %r", raw)
        return None


def _render(request, view, views, session, t):
    return render(
        request,
        "menu.html",
        t,
        shell=views.shell(session),
        view=view,
        page_items=view.visible_items(),
        categories=category_choices(),
        all_categories=ALL_CATEGORIES,
        category_label=category_label,
    )


@router.get("", summary="Menu items")
def list_menu(
    request: Request,
    category: Optional[str] = None,
    page: Optional[str] = None,
    session: SessionContext = Depends(require_session),
    client: ApiClient = Depends(get_api_client),
    views: ViewStateStore = Depends(get_view_store),
    t: Translator = Depends(get_text),
):
    """List, filter and page through the working set."""
    if is_navigation(request):
        view = views.mount(session, MenuManagementView.NAME, _factory(client))
    else:
        view = _view(session, views, client)
    if category is not None and category != view.filter_category:
        view.set_filter(category)
    page_number = _page_number(page)
    if page_number is not None:
        view.go_to_page(page_number)
    return _render(request, view, views, session, t)


@router.get("/new", summary="Open the add form")
def new_item(
    request: Request,
    session: SessionContext = Depends(require_session),
    client: ApiClient = Depends(get_api_client),
    views: ViewStateStore = Depends(get_view_store),
    t: Translator = Depends(get_text),
):
    view = _view(session, views, client)
    view.open_new()
    return _render(request, view, views, session, t)


@router.get("/{item_id}/edit", summary="Open the edit form")
def edit_item(
    item_id: str,
    request: Request,
    session: SessionContext = Depends(require_session),
    client: ApiClient = Depends(get_api_client),
    views: ViewStateStore = Depends(get_view_store),
    t: Translator = Depends(get_text),
):
    view = _view(session, views, client)
    if view.open_edit(item_id) is None:
        return _list_redirect(view)
    return _render(request, view, views, session, t)


@router.post("/form", summary="Save a menu item")
def submit_item(
    request: Request,
    id: str = Form(""),
    name: str = Form(""),
    description: str = Form(""),
    price: str = Form(""),
    category: str = Form(""),
    image: Optional[UploadFile] = File(None),
    session: SessionContext = Depends(require_session),
    client: ApiClient = Depends(get_api_client),
    views: ViewStateStore = Depends(get_view_store),
    t: Translator = Depends(get_text),
):
    """
    Create (no id) or update (id present). The image part is forwarded only
    when a new file was chosen; on failure the form is shown again as typed.
    """
    view = _view(session, views, client)
    values = {
        "id": id,
        "name": name,
        "description": description,
        "price": price,
        "category": category or None,
    }
    if view.submit(values, read_upload(image)):
        return _list_redirect(view)
    return _render(request, view, views, session, t)


@router.post("/form/cancel", summary="Close the form")
def cancel_form(
    session: SessionContext = Depends(require_session),
    client: ApiClient = Depends(get_api_client),
    views: ViewStateStore = Depends(get_view_store),
):
    view = _view(session, views, client)
    view.cancel_form()
    return _list_redirect(view)


@router.get("/{item_id}/delete", summary="Confirm deletion")
def confirm_delete_page(
    item_id: str,
    request: Request,
    session: SessionContext = Depends(require_session),
    client: ApiClient = Depends(get_api_client),
    views: ViewStateStore = Depends(get_view_store),
    t: Translator = Depends(get_text),
):
    view = _view(session, views, client)
    if not view.request_delete(item_id):
        return _list_redirect(view)
    item = view.find(item_id)
    return render(
        request,
        "confirm.html",
        t,
        shell=views.shell(session),
        question=t("menu.confirm_delete"),
        subject=item.name,
        action=f"{MENU_PATH}/delete",
    )


@router.post("/delete", summary="Delete a menu item")
def delete_item(
    confirm: str = Form("no"),
    session: SessionContext = Depends(require_session),
    client: ApiClient = Depends(get_api_client),
    views: ViewStateStore = Depends(get_view_store),
):
    """Only a ``yes`` answer reaches the backend."""
    view = _view(session, views, client)
    view.confirm_delete(confirm == "yes")
    return _list_redirect(view)
