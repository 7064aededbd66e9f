"""
Offer badges view: list, create and delete.
Badges have no edit operation; a changed offer is deleted and re-created.
"""
from dataclasses import dataclass
from typing import Optional
import logging

from pydantic import ValidationError

from visconti_admin.core.exceptions import ApiError
from visconti_admin.core.lifecycle import ViewLifecycle
from visconti_admin.repositories.offer_badge_repository import OfferBadgeRepository
from visconti_admin.schemas.offer_badge import OfferBadge, OfferBadgeCreate

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("title", "discount", "expiry_date")


@dataclass
class BadgeDraft:
    title: str = ""
    description: str = ""
    discount: str = ""
    expiry_date: str = ""

    def update(self, values: dict) -> None:
        for name in ("title", "description", "discount", "expiry_date"):
            if values.get(name) is not None:
                setattr(self, name, str(values[name]).strip())

    def missing_fields(self) -> list[str]:
        return [name for name in REQUIRED_FIELDS if not getattr(self, name)]

    def to_create(self) -> OfferBadgeCreate:
        return OfferBadgeCreate(
            title=self.title,
            description=self.description,
            discount=self.discount,
            expiry_date=self.expiry_date,
        )


class OfferBadgeView:
    NAME = "offers"

    def __init__(self, repo: OfferBadgeRepository) -> None:
        logger.trace("Initializing OfferBadgeView")
        self._repo = repo
        self.lifecycle = ViewLifecycle(self.NAME)
        self.badges: list[OfferBadge] = []
        self.loading = False
        self.form = BadgeDraft()
        self.submitting = False
        self.pending_delete: Optional[str] = None

    def load(self) -> None:
        token = self.lifecycle.current()
        self.loading = True
        try:
            badges = self._repo.list_all()
        except ApiError:
            logger.error("Error fetching badges", exc_info=True)
            return
        finally:
            self.loading = False
        if self.lifecycle.is_live(token):
            self.badges = badges
            logger.info("Loaded %s offer badges", len(badges))

    def submit(self, values: dict) -> bool:
        """Create a badge and put it at the front of the list."""
        if self.submitting:
            logger.warning("Badge submit ignored while a request is outstanding")
            return False
        self.form.update(values)
        missing = self.form.missing_fields()
        if missing:
            logger.info("Badge submit skipped, missing fields=%s", ", ".join(missing))
            return False
        try:
            payload = self.form.to_create()
        except ValidationError as e:
            logger.warning("Badge form rejected: %s", e.errors())
            return False

        self.submitting = True
        try:
            badge = self._repo.create(payload)
        except ApiError:
            logger.error("Error adding badge", exc_info=True)
            return False
        finally:
            self.submitting = False

        self.badges = [badge, *self.badges]
        self.form = BadgeDraft()
        logger.info("Offer badge created id=%s", badge.id)
        return True

    def request_delete(self, badge_id: str) -> bool:
        if not any(badge.id == badge_id for badge in self.badges):
            logger.warning("Delete requested for unknown badge id=%s", badge_id)
            return False
        self.pending_delete = badge_id
        return True

    def confirm_delete(self, accepted: bool) -> bool:
        badge_id, self.pending_delete = self.pending_delete, None
        if badge_id is None or not accepted:
            return False
        try:
            self._repo.delete(badge_id)
        except ApiError:
            logger.error("Error deleting badge id=%s", badge_id, exc_info=True)
            return False
        self.badges = [badge for badge in self.badges if badge.id != badge_id]
        logger.info("Offer badge deleted id=%s", badge_id)
        return True
