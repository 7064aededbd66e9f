"""
Application entry point.
Run with:  uvicorn visconti_admin.main:app --reload

The backend REST API is configured with the BACKEND_URI environment
variable (see visconti_admin/core/config.py).
"""
import logging
from urllib.parse import urlencode

from fastapi import FastAPI, Request
from fastapi.responses import RedirectResponse

from visconti_admin.core.logging_config import configure_logging

from visconti_admin.api.router import admin_router
from visconti_admin.api.templating import render
from visconti_admin.core.config import settings
from visconti_admin.core.exceptions import ApiError, LoginRequired
from visconti_admin.core.i18n import get_translator
from visconti_admin.services.navigation_service import LOGIN_PATH

configure_logging()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application instance."""
    logger = logging.getLogger(__name__)
    logger.info("Starting admin dashboard setup")
    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description=(
            "Administration dashboard for the restaurant menu, offer badges "
            "and menu images, backed by the restaurant REST API."
        ),
        docs_url=None,
        redoc_url=None,
    )

    # ── Routers ─────────────────────────────────────────────────────────────
    app.include_router(admin_router)

    # ── Exception handlers ──────────────────────────────────────────────────
    @app.exception_handler(LoginRequired)
    def login_required_handler(request: Request, exc: LoginRequired):
        """Send guests to the login view before any protected content renders."""
        query = urlencode({"next": exc.next_path}) if exc.next_path else ""
        target = f"{LOGIN_PATH}?{query}" if query else LOGIN_PATH
        return RedirectResponse(target, status_code=303)

    @app.exception_handler(ApiError)
    def api_error_handler(request: Request, exc: ApiError):
        """Last resort for backend failures a view did not handle itself."""
        logger.error(
            "Unhandled API error on %s %s: %s", exc.method, exc.path, exc.message
        )
        t = get_translator()
        return render(request, "error.html", t, status_code=502, message=t("error.backend"))

    return app


app = create_app()
