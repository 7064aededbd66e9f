"""
Menu management view.

State machine per item:
    none -> editing(new | existing) -> submitting -> none (success)
                                                  -> editing (failure)
    none -> confirming-delete -> removed (success) | unchanged (failure/declined)

The working set is replaced wholesale on load and otherwise patched by
exactly one entity per successful server response.
"""
from dataclasses import dataclass, field
from typing import Optional
import logging

from pydantic import ValidationError

from visconti_admin.core.exceptions import ApiError
from visconti_admin.core.lifecycle import ViewLifecycle
from visconti_admin.models.pagination import Pagination
from visconti_admin.models.pending_file import PendingFile
from visconti_admin.repositories.menu_repository import MenuRepository
from visconti_admin.schemas.menu import (
    ALL_CATEGORIES,
    DEFAULT_CATEGORY,
    MenuCategory,
    MenuItem,
    MenuItemForm,
)

logger = logging.getLogger(__name__)

DRAFT_FIELDS = ("name", "description", "price", "category")


@dataclass
class MenuDraft:
    """Local form state; ``pending_file`` is set only by a fresh selection."""

    id: Optional[str] = None
    name: str = ""
    description: str = ""
    price: str = ""
    category: str = DEFAULT_CATEGORY.value
    image_url: Optional[str] = None
    pending_file: Optional[PendingFile] = field(default=None, repr=False)
    preview_url: Optional[str] = field(default=None, repr=False)

    @property
    def is_edit(self) -> bool:
        return bool(self.id)

    @classmethod
    def from_item(cls, item: MenuItem) -> "MenuDraft":
        return cls(
            id=item.id,
            name=item.name,
            description=item.description,
            price=item.price,
            category=item.category,
            image_url=item.image,
            preview_url=item.image,
        )

    def update(self, values: dict) -> None:
        for name in DRAFT_FIELDS:
            if name in values and values[name] is not None:
                setattr(self, name, str(values[name]))

    def to_form(self) -> MenuItemForm:
        return MenuItemForm(
            name=self.name,
            description=self.description,
            price=self.price,
            category=self.category,
        )


class MenuManagementView:
    """CRUD over menu items with category filter and client-side paging."""

    NAME = "menu"

    def __init__(self, repo: MenuRepository, page_size: int) -> None:
        logger.trace("Initializing MenuManagementView")
        self._repo = repo
        self.lifecycle = ViewLifecycle(self.NAME)
        self.items: list[MenuItem] = []
        self.loading = False
        self.filter_category = ALL_CATEGORIES
        self.pagination = Pagination(page_size=page_size)
        self.draft: Optional[MenuDraft] = None
        self.submitting = False
        self.pending_delete: Optional[str] = None

    # ------------------------------------------------------------------
    # List / filter / paginate
    # ------------------------------------------------------------------

    def load(self) -> None:
        """Fetch the grouped menu and flatten it into the working set."""
        token = self.lifecycle.current()
        self.loading = True
        try:
            grouped = self._repo.list_grouped()
        except ApiError:
            logger.error("Error fetching menu", exc_info=True)
            return
        finally:
            self.loading = False
        if self.lifecycle.is_live(token):
            self.items = grouped.flatten()
            self.pagination.resize(len(self.filtered_items))
            logger.info("Loaded %s menu items", len(self.items))

    @property
    def filtered_items(self) -> list[MenuItem]:
        if self.filter_category == ALL_CATEGORIES:
            return list(self.items)
        return [item for item in self.items if item.category == self.filter_category]

    def set_filter(self, category: str) -> None:
        """Select a category key (or ``all``); the cursor goes back to page 0."""
        logger.trace("Menu filter set to %s", category)
        self.filter_category = category or ALL_CATEGORIES
        self.pagination.reset(len(self.filtered_items))

    def visible_items(self) -> list[MenuItem]:
        filtered = self.filtered_items
        self.pagination.resize(len(filtered))
        return self.pagination.slice(filtered)

    def next_page(self) -> None:
        self.pagination.resize(len(self.filtered_items))
        self.pagination.next()

    def previous_page(self) -> None:
        self.pagination.resize(len(self.filtered_items))
        self.pagination.previous()

    def go_to_page(self, page: int) -> None:
        self.pagination.resize(len(self.filtered_items))
        self.pagination.go_to(page)

    # ------------------------------------------------------------------
    # Create / edit form
    # ------------------------------------------------------------------

    @property
    def form_open(self) -> bool:
        return self.draft is not None

    def open_new(self) -> MenuDraft:
        self.draft = MenuDraft()
        return self.draft

    def open_edit(self, item_id: str) -> Optional[MenuDraft]:
        item = self.find(item_id)
        if item is None:
            logger.warning("Menu item id=%s not in working set", item_id)
            return None
        self.draft = MenuDraft.from_item(item)
        return self.draft

    def cancel_form(self) -> None:
        self.draft = None

    def select_image(self, pending: PendingFile) -> None:
        """Replace any earlier selection and preview it locally."""
        if self.draft is None:
            self.open_new()
        self.draft.pending_file = pending
        self.draft.preview_url = pending.data_url()

    def submit(self, values: dict, image: Optional[PendingFile] = None) -> bool:
        """
        Send the draft as multipart data: POST when it has no id, PUT to the
        item endpoint otherwise. Returns True when the form closed.
        """
        if self.submitting:
            logger.warning("Menu submit ignored while a request is outstanding")
            return False
        if self.draft is None:
            self.draft = MenuDraft(id=values.get("id") or None)
        self.draft.update(values)
        if image is not None:
            self.select_image(image)

        try:
            form = self.draft.to_form()
        except ValidationError as e:
            logger.warning("Menu form rejected: %s", e.errors())
            return False

        draft = self.draft
        self.submitting = True
        try:
            if draft.is_edit:
                saved = self._repo.update(draft.id, form, draft.pending_file)
                self.items = [saved if item.id == draft.id else item for item in self.items]
                logger.info("Menu item updated id=%s", saved.id)
            else:
                saved = self._repo.create(form, draft.pending_file)
                self.items = [*self.items, saved]
                logger.info("Menu item created id=%s", saved.id)
        except ApiError:
            logger.error("Error adding/updating menu item", exc_info=True)
            return False
        finally:
            self.submitting = False

        self.draft = None
        return True

    # ------------------------------------------------------------------
    # Delete
    # ------------------------------------------------------------------

    def request_delete(self, item_id: str) -> bool:
        if self.find(item_id) is None:
            logger.warning("Delete requested for unknown menu item id=%s", item_id)
            return False
        self.pending_delete = item_id
        return True

    def confirm_delete(self, accepted: bool) -> bool:
        """Delete the pending item if *accepted*; True when it was removed."""
        item_id, self.pending_delete = self.pending_delete, None
        if item_id is None or not accepted:
            logger.trace("Menu delete declined")
            return False
        try:
            self._repo.delete(item_id)
        except ApiError:
            logger.error("Error deleting menu item id=%s", item_id, exc_info=True)
            return False
        self.items = [item for item in self.items if item.id != item_id]
        self.pagination.resize(len(self.filtered_items))
        logger.info("Menu item deleted id=%s", item_id)
        return True

    def find(self, item_id: str) -> Optional[MenuItem]:
        return next((item for item in self.items if item.id == item_id), None)


def category_choices() -> list[MenuCategory]:
    return list(MenuCategory)
