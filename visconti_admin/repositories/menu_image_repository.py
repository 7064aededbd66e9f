"""
Repository layer for menu gallery images (``api/images``).
"""
import logging

from visconti_admin.clients.api_client import ApiClient, parse
from visconti_admin.models.pending_file import PendingFile
from visconti_admin.schemas.menu_image import MenuImage

logger = logging.getLogger(__name__)

IMAGES_PATH = "api/images"


class MenuImageRepository:
    """Remote data access for gallery images."""

    def __init__(self, client: ApiClient) -> None:
        logger.trace("Initializing MenuImageRepository")
        self._client = client

    def list_all(self) -> list[MenuImage]:
        logger.trace("Fetching gallery images")
        return parse(self._client.get(IMAGES_PATH), list[MenuImage])

    def upload(self, pending: PendingFile) -> MenuImage:
        logger.trace("Uploading gallery image name=%s", pending.filename)
        return parse(self._client.post(IMAGES_PATH, files=pending.as_upload()), MenuImage)

    def delete(self, image_id: str) -> None:
        logger.trace("Deleting gallery image id=%s", image_id)
        self._client.delete(f"{IMAGES_PATH}/{image_id}")
