"""
Pydantic schemas for menu gallery images.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class MenuImage(BaseModel):
    """A standalone gallery image; immutable once uploaded."""

    id: str = Field(..., alias="_id")
    image_url: str = Field(..., alias="imageUrl")
    created_at: Optional[str] = Field(default=None, alias="createdAt")

    model_config = ConfigDict(populate_by_name=True)

    @property
    def uploaded_label(self) -> str:
        return format_upload_date(self.created_at)


def format_upload_date(value: Optional[str]) -> str:
    """Render an ISO timestamp as ``Mon DD, YYYY, HH:MM AM``."""
    if not value:
        return "Unknown date"
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return "Unknown date"
    return parsed.strftime("%b %d, %Y, %I:%M %p")
