"""
Pydantic schemas for menu item request/response validation.
"""
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Optional
import logging

from pydantic import BaseModel, ConfigDict, Field, field_validator

from visconti_admin.models.pending_file import PendingFile

logger = logging.getLogger(__name__)


class MenuCategory(str, Enum):
    """Fixed category set shared with the backend."""

    PIZZE_TRADIZIONALI = "pizze-tradizionali"
    PIZZE_SPECIALI = "pizze-speciali"
    CALZONI = "calzoni"
    KEBAB_PANINI = "kebab-panini"
    BURGERS = "burgers"
    BIBITE = "bibite"
    FRITTE = "fritte"
    INDIAN_CUISINE = "Indian cuisine"
    DOLCO = "dolco"

    @property
    def display_name(self) -> str:
        return CATEGORY_DISPLAY_NAMES.get(self, self.value)


CATEGORY_DISPLAY_NAMES = {MenuCategory.BURGERS: "Burgers"}

DEFAULT_CATEGORY = MenuCategory.PIZZE_TRADIZIONALI

ALL_CATEGORIES = "all"


def category_label(value: str) -> str:
    """Return the display name for a category key, or the key itself."""
    try:
        return MenuCategory(value).display_name
    except ValueError:
        return value


# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------

class MenuItemForm(BaseModel):
    """Text fields sent as multipart form data on create and update."""

    name: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1, max_length=2000)
    price: str = Field(..., min_length=1)
    category: MenuCategory = DEFAULT_CATEGORY

    @field_validator("price", mode="before")
    @classmethod
    def validate_price(cls, v):
        """Keep the price as a decimal string, rejecting non-numeric input."""
        logger.trace("Validating menu item price")
        if v is None:
            return v
        raw = str(v).strip()
        try:
            value = Decimal(raw)
        except InvalidOperation:
            raise ValueError("price must be a decimal number")
        if value < 0:
            raise ValueError("price must not be negative")
        return raw

    def to_form_data(self) -> dict[str, str]:
        return {
            "name": self.name,
            "description": self.description,
            "price": self.price,
            "category": self.category.value,
        }

    def to_multipart(self, image: Optional[PendingFile] = None) -> dict[str, tuple]:
        """
        Multipart parts for ``requests``: text fields go as filename-less
        parts so the body is multipart even without an image.
        """
        parts = {name: (None, value) for name, value in self.to_form_data().items()}
        if image is not None:
            parts.update(image.as_upload())
        return parts


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------

class MenuItem(BaseModel):
    """A menu item as stored by the backend."""

    id: str = Field(..., alias="_id")
    name: str
    description: str = ""
    price: str
    category: str
    image: Optional[str] = None
    available: bool = True

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("price", mode="before")
    @classmethod
    def price_as_string(cls, v):
        """Backends may send the price as a number."""
        return v if isinstance(v, str) else str(v)

    @property
    def category_label(self) -> str:
        return category_label(self.category)


class GroupedMenuResponse(BaseModel):
    """``GET api/menu`` body: items grouped by category key."""

    grouped_items: dict[str, list[MenuItem]] = Field(..., alias="groupedItems")

    model_config = ConfigDict(populate_by_name=True)

    def flatten(self) -> list[MenuItem]:
        """Category iteration order, then each category's internal order."""
        return [item for items in self.grouped_items.values() for item in items]

    def total_count(self) -> int:
        return sum(len(items) for items in self.grouped_items.values())
