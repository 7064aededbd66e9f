"""
Central router – registers every admin page router.
"""
from fastapi import APIRouter
import logging

from visconti_admin.api.routes import auth, dashboard, menu, menu_images, offers, shell

logger = logging.getLogger(__name__)

admin_router = APIRouter()

logger.info("Registering admin page routers")
admin_router.include_router(auth.router)
admin_router.include_router(shell.router)
admin_router.include_router(dashboard.router)
admin_router.include_router(menu.router)
admin_router.include_router(offers.router)
admin_router.include_router(menu_images.router)
