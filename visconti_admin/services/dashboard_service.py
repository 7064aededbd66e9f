"""
Dashboard view: a single menu fetch reduced to an item count.
The other tiles have no data source yet and always show a placeholder.
"""
from dataclasses import dataclass
from typing import Optional
import logging

from visconti_admin.core.exceptions import ApiError
from visconti_admin.core.i18n import Translator
from visconti_admin.core.lifecycle import ViewLifecycle
from visconti_admin.repositories.menu_repository import MenuRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StatTile:
    title: str
    value: str
    icon: str
    color: str


class DashboardView:
    """Read-only summary view."""

    NAME = "dashboard"

    def __init__(self, repo: MenuRepository, t: Translator) -> None:
        logger.trace("Initializing DashboardView")
        self._repo = repo
        self._t = t
        self.lifecycle = ViewLifecycle(self.NAME)
        self.menu_count: Optional[int] = None
        self.loading = False

    def load(self) -> None:
        """Fetch the menu once; on failure the count stays unset."""
        token = self.lifecycle.current()
        self.loading = True
        try:
            grouped = self._repo.list_grouped()
        except ApiError:
            logger.error("Error fetching menu for dashboard", exc_info=True)
            return
        finally:
            self.loading = False
        if self.lifecycle.is_live(token):
            self.menu_count = grouped.total_count()
            logger.info("Dashboard menu count=%s", self.menu_count)

    def stats(self) -> list[StatTile]:
        t = self._t
        if self.loading:
            menu_value = t("dashboard.loading")
        else:
            menu_value = str(self.menu_count if self.menu_count is not None else 0)
        return [
            StatTile(t("dashboard.total_orders"), t("dashboard.coming_soon"),
                     "shopping-cart", "text-green-500"),
            StatTile(t("dashboard.revenue"), t("dashboard.coming_soon"),
                     "dollar-sign", "text-blue-500"),
            StatTile(t("dashboard.menu_items"), menu_value,
                     "utensils-crossed", "text-orange-500"),
            StatTile(t("dashboard.active_orders"), t("dashboard.coming_soon"),
                     "clock", "text-gold"),
        ]
