"""
Menu image gallery view.

Files are validated before selection (image content type, size ceiling),
uploaded one at a time, and the gallery is re-fetched after every successful
upload or delete. Feedback goes through a transient status message.
"""
from typing import Callable, Optional
import logging
import time

from visconti_admin.core.exceptions import ApiError, ApiStatusError, ImageValidationError
from visconti_admin.core.i18n import Translator
from visconti_admin.core.lifecycle import ViewLifecycle
from visconti_admin.models.pending_file import PendingFile, validate_image
from visconti_admin.models.status import TransientStatus
from visconti_admin.repositories.menu_image_repository import MenuImageRepository
from visconti_admin.schemas.menu_image import MenuImage

logger = logging.getLogger(__name__)


def _failure_message(error: ApiError, fallback: str) -> str:
    if isinstance(error, ApiStatusError) and error.server_message:
        return error.server_message
    return fallback


class MenuImageGalleryView:
    NAME = "menu-img"

    def __init__(
        self,
        repo: MenuImageRepository,
        t: Translator,
        max_bytes: int,
        status_seconds: float,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        logger.trace("Initializing MenuImageGalleryView")
        self._repo = repo
        self._t = t
        self.max_bytes = max_bytes
        self.lifecycle = ViewLifecycle(self.NAME)
        self.images: list[MenuImage] = []
        self.loading = False
        self.pending_file: Optional[PendingFile] = None
        self.preview_url: Optional[str] = None
        self.uploading = False
        self.deleting_id: Optional[str] = None
        self.pending_delete: Optional[str] = None
        self.status = TransientStatus(ttl=status_seconds, clock=clock)

    # ------------------------------------------------------------------
    # List
    # ------------------------------------------------------------------

    def load(self) -> None:
        token = self.lifecycle.current()
        self.loading = True
        try:
            images = self._repo.list_all()
        except ApiError:
            logger.error("Error fetching images", exc_info=True)
            self.status.error(self._t("gallery.fetch_failed"))
            return
        finally:
            self.loading = False
        if self.lifecycle.is_live(token):
            self.images = images
            logger.info("Loaded %s gallery images", len(images))

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    def select_file(self, pending: PendingFile) -> bool:
        """Accept *pending* if it passes validation; otherwise keep the old state."""
        try:
            validate_image(pending, self.max_bytes)
        except ImageValidationError as e:
            self.status.error(self._t(f"gallery.invalid_{e.reason}"))
            return False
        self.pending_file = pending
        self.preview_url = pending.data_url()
        self.status.clear()
        return True

    def remove_file(self) -> None:
        self.pending_file = None
        self.preview_url = None
        self.status.clear()

    # ------------------------------------------------------------------
    # Upload
    # ------------------------------------------------------------------

    def upload(self) -> bool:
        """Upload the pending file; it is kept on failure so a retry needs no reselect."""
        if self.pending_file is None:
            self.status.error(self._t("gallery.select_first"))
            return False
        if self.uploading:
            logger.warning("Upload ignored while a request is outstanding")
            return False

        self.uploading = True
        self.status.clear()
        try:
            self._repo.upload(self.pending_file)
        except ApiError as e:
            logger.error("Error uploading image", exc_info=True)
            self.status.error(_failure_message(e, self._t("gallery.upload_failed")))
            return False
        finally:
            self.uploading = False

        logger.info("Gallery image uploaded name=%s", self.pending_file.filename)
        self.status.success(self._t("gallery.upload_success"))
        self.pending_file = None
        self.preview_url = None
        self.load()
        return True

    # ------------------------------------------------------------------
    # Delete
    # ------------------------------------------------------------------

    def request_delete(self, image_id: str) -> bool:
        if not any(image.id == image_id for image in self.images):
            logger.warning("Delete requested for unknown image id=%s", image_id)
            return False
        self.pending_delete = image_id
        return True

    def confirm_delete(self, accepted: bool) -> bool:
        image_id, self.pending_delete = self.pending_delete, None
        if image_id is None or not accepted:
            return False

        self.deleting_id = image_id
        try:
            self._repo.delete(image_id)
        except ApiError as e:
            logger.error("Error deleting image id=%s", image_id, exc_info=True)
            self.status.error(_failure_message(e, self._t("gallery.delete_failed")))
            return False
        finally:
            self.deleting_id = None

        logger.info("Gallery image deleted id=%s", image_id)
        self.status.success(self._t("gallery.delete_success"))
        self.load()
        return True
