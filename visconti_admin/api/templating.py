"""
Jinja2 rendering shared by every admin page: the shell context (navigation,
active entry, sidebar state) plus the page's own variables.
"""
from pathlib import Path
from typing import Optional
from urllib.parse import urlencode
import logging

from fastapi import Request
from fastapi.responses import RedirectResponse
from fastapi.templating import Jinja2Templates

from visconti_admin.core.i18n import Translator
from visconti_admin.services.navigation_service import (
    HOME_PATH,
    NAVIGATION,
    ShellState,
    active_entry,
    is_active,
)

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def render(
    request: Request,
    name: str,
    t: Translator,
    shell: Optional[ShellState] = None,
    status_code: int = 200,
    **context,
):
    """Render *name* inside the admin shell."""
    path = request.url.path
    active = active_entry(path)
    logger.trace("Rendering %s for %s", name, path)
    page_context = {
        "t": t,
        "navigation": [(entry, is_active(path, entry.href)) for entry in NAVIGATION],
        "page_title": t(active.key) if active else t("nav.dashboard"),
        "shell": shell or ShellState(),
        "current_path": path,
        **context,
    }
    return templates.TemplateResponse(
        request, name, page_context, status_code=status_code
    )


def redirect(path: str, **params) -> RedirectResponse:
    """303 redirect, so a POST is followed by a GET."""
    query = urlencode({k: v for k, v in params.items() if v is not None})
    return RedirectResponse(f"{path}?{query}" if query else path, status_code=303)


def safe_next(target: Optional[str]) -> str:
    """Only local admin paths are accepted as redirect targets."""
    if target and target.startswith("/admin") and not target.startswith("//"):
        return target
    return HOME_PATH


def is_navigation(request: Request) -> bool:
    """A bare page path (no query string) is a navigation and remounts the view."""
    return not request.url.query
