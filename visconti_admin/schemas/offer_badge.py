"""
Pydantic schemas for offer badge request/response validation.
"""
from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def whole_number(value: float):
    """Return *value* as an int when it has no fractional part."""
    return int(value) if float(value).is_integer() else value


class OfferBadgeCreate(BaseModel):
    """JSON body for ``POST api/offer-badges``."""

    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(default="", max_length=500)
    discount: float = Field(..., ge=0, le=100)
    expiry_date: date = Field(..., alias="expiryDate")

    model_config = ConfigDict(populate_by_name=True)

    def to_json(self) -> dict:
        return {
            "title": self.title,
            "description": self.description,
            "discount": whole_number(self.discount),
            "expiryDate": self.expiry_date.isoformat(),
        }


class OfferBadge(BaseModel):
    """A promotional badge; ``is_active`` is derived by the backend."""

    id: str = Field(..., alias="_id")
    title: str
    description: Optional[str] = None
    discount: float
    expiry_date: date = Field(..., alias="expiryDate")
    is_active: bool = Field(default=True, alias="isActive")

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("expiry_date", mode="before")
    @classmethod
    def date_part(cls, v):
        """Accept full ISO timestamps by keeping their calendar date."""
        if isinstance(v, str) and "T" in v:
            return v.split("T", 1)[0]
        return v

    @property
    def discount_label(self) -> str:
        return f"{whole_number(self.discount)}%"
