"""
Repository layer for offer badges (``api/offer-badges``).
There is no update call: badges are created and deleted only.
"""
import logging

from visconti_admin.clients.api_client import ApiClient, parse
from visconti_admin.schemas.offer_badge import OfferBadge, OfferBadgeCreate

logger = logging.getLogger(__name__)

BADGES_PATH = "api/offer-badges"


class OfferBadgeRepository:
    """Remote data access for offer badges."""

    def __init__(self, client: ApiClient) -> None:
        logger.trace("Initializing OfferBadgeRepository")
        self._client = client

    def list_all(self) -> list[OfferBadge]:
        logger.trace("Fetching offer badges")
        return parse(self._client.get(BADGES_PATH), list[OfferBadge])

    def create(self, badge: OfferBadgeCreate) -> OfferBadge:
        logger.trace("Creating offer badge title=%s", badge.title)
        return parse(self._client.post(BADGES_PATH, json=badge.to_json()), OfferBadge)

    def delete(self, badge_id: str) -> None:
        logger.trace("Deleting offer badge id=%s", badge_id)
        self._client.delete(f"{BADGES_PATH}/{badge_id}")
