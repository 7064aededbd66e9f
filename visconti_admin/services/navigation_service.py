"""
Shell navigation: destinations, active-entry matching and sidebar state.
"""
from dataclasses import dataclass
from typing import Optional
import logging

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NavEntry:
    key: str
    href: str
    icon: str


NAVIGATION: tuple[NavEntry, ...] = (
    NavEntry("nav.dashboard", "/admin/dashboard", "layout-dashboard"),
    NavEntry("nav.menu", "/admin/menu", "utensils-crossed"),
    NavEntry("nav.offers", "/admin/offer", "users"),
    NavEntry("nav.settings", "/admin/settings", "settings"),
    NavEntry("nav.menu_images", "/admin/menu-img", "image"),
)

LOGIN_PATH = "/admin/login"
HOME_PATH = "/admin/dashboard"


def is_active(path: str, href: str) -> bool:
    """Exact match, or *path* lies below *href*."""
    return path == href or path.startswith(href + "/")


def active_entry(path: str) -> Optional[NavEntry]:
    for entry in NAVIGATION:
        if is_active(path, entry.href):
            return entry
    return None


def is_navigation_target(href: str) -> bool:
    return any(entry.href == href for entry in NAVIGATION)


@dataclass
class ShellState:
    """
    Desktop sidebar collapse and mobile overlay visibility. The two are
    independent; collapsing only narrows the desktop sidebar.
    """

    sidebar_open: bool = True
    mobile_sidebar_open: bool = False

    def toggle_sidebar(self) -> None:
        self.sidebar_open = not self.sidebar_open
        logger.trace("Desktop sidebar open=%s", self.sidebar_open)

    def open_mobile(self) -> None:
        self.mobile_sidebar_open = True

    def close_mobile(self) -> None:
        self.mobile_sidebar_open = False
