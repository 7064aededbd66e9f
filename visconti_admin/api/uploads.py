"""Conversion of multipart uploads into pending files."""
from typing import Optional

from fastapi import UploadFile

from visconti_admin.models.pending_file import PendingFile


def read_upload(upload: Optional[UploadFile]) -> Optional[PendingFile]:
    """Return the uploaded file, or None when the field was left empty."""
    if upload is None or not upload.filename:
        return None
    return PendingFile(
        filename=upload.filename,
        content_type=upload.content_type or "application/octet-stream",
        data=upload.file.read(),
    )
