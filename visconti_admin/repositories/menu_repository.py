"""
Repository layer for menu items.
All calls to the ``api/menu`` endpoints live here.
"""
from typing import Optional
import logging

from visconti_admin.clients.api_client import ApiClient, parse
from visconti_admin.models.pending_file import PendingFile
from visconti_admin.schemas.menu import GroupedMenuResponse, MenuItem, MenuItemForm

logger = logging.getLogger(__name__)

MENU_PATH = "api/menu"


class MenuRepository:
    """Remote data access for menu item records."""

    def __init__(self, client: ApiClient) -> None:
        logger.trace("Initializing MenuRepository")
        self._client = client

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def list_grouped(self) -> GroupedMenuResponse:
        """Return the menu grouped by category key."""
        logger.trace("Fetching grouped menu")
        return parse(self._client.get(MENU_PATH), GroupedMenuResponse)

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    def create(self, form: MenuItemForm, image: Optional[PendingFile] = None) -> MenuItem:
        """Create an item as multipart; the image part is added only when given."""
        logger.trace("Creating menu item name=%s", form.name)
        body = self._client.post(MENU_PATH, files=form.to_multipart(image))
        return parse(body, MenuItem)

    def update(
        self, item_id: str, form: MenuItemForm, image: Optional[PendingFile] = None
    ) -> MenuItem:
        """Update an item; without a new file the stored image is kept."""
        logger.trace("Updating menu item id=%s", item_id)
        body = self._client.put(f"{MENU_PATH}/{item_id}", files=form.to_multipart(image))
        return parse(body, MenuItem)

    def delete(self, item_id: str) -> None:
        logger.trace("Deleting menu item id=%s", item_id)
        self._client.delete(f"{MENU_PATH}/{item_id}")
