"""
Domain model for a file chosen in a form but not yet uploaded.
The preview data URL is generated locally and never sent to the backend.
"""
from dataclasses import dataclass, field
import base64
import logging

from visconti_admin.core.exceptions import ImageValidationError

logger = logging.getLogger(__name__)


@dataclass
class PendingFile:
    filename: str
    content_type: str
    data: bytes = field(repr=False)

    def __post_init__(self) -> None:
        logger.trace(
            "Initialized PendingFile name=%s size=%s", self.filename, self.size
        )

    @property
    def size(self) -> int:
        return len(self.data)

    @property
    def is_image(self) -> bool:
        return (self.content_type or "").startswith("image/")

    def data_url(self) -> str:
        """Return the file encoded as a ``data:`` URL for previews."""
        encoded = base64.b64encode(self.data).decode("ascii")
        return f"data:{self.content_type};base64,{encoded}"

    def as_upload(self, field_name: str = "image") -> dict:
        """Return the ``files`` mapping expected by the API client."""
        return {field_name: (self.filename, self.data, self.content_type)}


def validate_image(pending: PendingFile, max_bytes: int) -> PendingFile:
    """
    Check that *pending* is an image no larger than *max_bytes*.

    Raises:
        ImageValidationError: with reason ``type`` or ``size``.
    """
    if not pending.is_image:
        logger.warning("Rejected non-image file name=%s", pending.filename)
        raise ImageValidationError(
            ImageValidationError.TYPE, "Please select an image file (JPG, PNG, WEBP)"
        )
    if pending.size > max_bytes:
        logger.warning(
            "Rejected oversized image name=%s size=%s", pending.filename, pending.size
        )
        raise ImageValidationError(
            ImageValidationError.SIZE, "Image must be less than 5MB"
        )
    return pending
