"""
Menu image gallery pages:
  GET  /admin/menu-img                   – Upload card and gallery
  POST /admin/menu-img/select            – Validate and keep a chosen file
  POST /admin/menu-img/remove            – Drop the pending file
  POST /admin/menu-img/upload            – Upload the pending (or posted) file
  GET  /admin/menu-img/{image_id}/delete – Ask for delete confirmation
  POST /admin/menu-img/delete            – Answer the delete confirmation
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
from visconti_admin.repositories.menu_image_repository import MenuImageRepository
from visconti_admin.services.menu_image_service import MenuImageGalleryView
from visconti_admin.services.view_state import ViewStateStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin/menu-img", tags=["Menu Images"])

GALLERY_PATH = "/admin/menu-img"


def _factory(client: ApiClient, t: Translator):
    return lambda: MenuImageGalleryView(
        MenuImageRepository(client),
        t,
        max_bytes=settings.MAX_IMAGE_BYTES,
        status_seconds=settings.STATUS_MESSAGE_SECONDS,
    )


def _view(session, views, client, t) -> MenuImageGalleryView:
    return views.get(session, MenuImageGalleryView.NAME, _factory(client, t))


def _back():
    return redirect(GALLERY_PATH, keep=1)


@router.get("", summary="Menu image gallery")
def gallery(
    request: Request,
    session: SessionContext = Depends(require_session),
    client: ApiClient = Depends(get_api_client),
    views: ViewStateStore = Depends(get_view_store),
    t: Translator = Depends(get_text),
):
    if is_navigation(request):
        view = views.mount(session, MenuImageGalleryView.NAME, _factory(client, t))
    else:
        view = _view(session, views, client, t)
    return render(
        request,
        "menu_images.html",
        t,
        shell=views.shell(session),
        view=view,
        status=view.status.current(),
    )


@router.post("/select", summary="Choose a file")
def select_file(
    image: Optional[UploadFile] = File(None),
    session: SessionContext = Depends(require_session),
    client: ApiClient = Depends(get_api_client),
    views: ViewStateStore = Depends(get_view_store),
    t: Translator = Depends(get_text),
):
    view = _view(session, views, client, t)
    pending = read_upload(image)
    if pending is not None:
        view.select_file(pending)
    return _back()


@router.post("/remove", summary="Drop the chosen file")
def remove_file(
    session: SessionContext = Depends(require_session),
    client: ApiClient = Depends(get_api_client),
    views: ViewStateStore = Depends(get_view_store),
    t: Translator = Depends(get_text),
):
    _view(session, views, client, t).remove_file()
    return _back()


@router.post("/upload", summary="Upload the chosen file")
def upload_file(
    image: Optional[UploadFile] = File(None),
    session: SessionContext = Depends(require_session),
    client: ApiClient = Depends(get_api_client),
    views: ViewStateStore = Depends(get_view_store),
    t: Translator = Depends(get_text),
):
    """A file posted with the request is validated first; an invalid one stops here."""
    view = _view(session, views, client, t)
    pending = read_upload(image)
    if pending is not None and not view.select_file(pending):
        return _back()
    view.upload()
    return _back()


@router.get("/{image_id}/delete", summary="Confirm deletion")
def confirm_delete_page(
    image_id: str,
    request: Request,
    session: SessionContext = Depends(require_session),
    client: ApiClient = Depends(get_api_client),
    views: ViewStateStore = Depends(get_view_store),
    t: Translator = Depends(get_text),
):
    view = _view(session, views, client, t)
    if not view.request_delete(image_id):
        return _back()
    return render(
        request,
        "confirm.html",
        t,
        shell=views.shell(session),
        question=t("gallery.confirm_delete"),
        subject=None,
        action=f"{GALLERY_PATH}/delete",
    )


@router.post("/delete", summary="Delete a gallery image")
def delete_image(
    confirm: str = Form("no"),
    session: SessionContext = Depends(require_session),
    client: ApiClient = Depends(get_api_client),
    views: ViewStateStore = Depends(get_view_store),
    t: Translator = Depends(get_text),
):
    view = _view(session, views, client, t)
    view.confirm_delete(confirm == "yes")
    return _back()
