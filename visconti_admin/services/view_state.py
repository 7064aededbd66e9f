"""
Per-session registry of mounted view states.

Each admin page owns a private view state (working set, form draft, status
message...). States are never shared between sessions or between views.
Sessions are kept in least-recently-used order; a session idle for longer
than ``idle_seconds``, or pushed out past ``max_sessions``, is evicted and
its views unmounted.
"""
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Callable, Optional, Protocol
import logging
import threading
import time

from visconti_admin.core.lifecycle import ViewLifecycle
from visconti_admin.core.session import SessionContext
from visconti_admin.services.navigation_service import ShellState

logger = logging.getLogger(__name__)


class ViewState(Protocol):
    lifecycle: ViewLifecycle

    def load(self) -> None: ...


@dataclass
class _SessionViews:
    last_seen: float
    views: dict[str, ViewState] = field(default_factory=dict)
    shell: ShellState = field(default_factory=ShellState)

    def unmount_all(self) -> None:
        for view in self.views.values():
            view.lifecycle.unmount()


class ViewStateStore:
    """Keeps mounted view states keyed by session and view name."""

    def __init__(
        self,
        max_sessions: int = 500,
        idle_seconds: float = 3600.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.max_sessions = max_sessions
        self.idle_seconds = idle_seconds
        self._clock = clock
        self._sessions: "OrderedDict[str, _SessionViews]" = OrderedDict()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

    # ------------------------------------------------------------------
    # Session bookkeeping (callers hold the lock)
    # ------------------------------------------------------------------

    def _touch(self, session: SessionContext) -> _SessionViews:
        """Return the entry for *session*, marking it most recently used."""
        now = self._clock()
        entry = self._sessions.get(session.key)
        if entry is None:
            entry = self._sessions[session.key] = _SessionViews(last_seen=now)
        else:
            entry.last_seen = now
            self._sessions.move_to_end(session.key)
        self._evict(now, keep=session.key)
        return entry

    def _evict(self, now: float, keep: str) -> None:
        while self._sessions:
            key, oldest = next(iter(self._sessions.items()))
            if key == keep:
                break
            idle = now - oldest.last_seen >= self.idle_seconds
            if not idle and len(self._sessions) <= self.max_sessions:
                break
            del self._sessions[key]
            logger.info(
                "Evicting %s session views=%s",
                "idle" if idle else "least recently used",
                len(oldest.views),
            )
            oldest.unmount_all()

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------

    def mount(
        self, session: SessionContext, name: str, factory: Callable[[], ViewState]
    ) -> ViewState:
        """Replace any previous instance of *name* with a freshly loaded one."""
        view = factory()
        with self._lock:
            views = self._touch(session).views
            previous = views.get(name)
            if previous is not None:
                previous.lifecycle.unmount()
            views[name] = view
        logger.info("Mounting view=%s", name)
        view.lifecycle.mount()
        view.load()
        return view

    def get(
        self, session: SessionContext, name: str, factory: Callable[[], ViewState]
    ) -> ViewState:
        """Return the mounted instance of *name*, mounting it when absent."""
        with self._lock:
            view = self._touch(session).views.get(name)
        if view is not None and view.lifecycle.mounted:
            return view
        return self.mount(session, name, factory)

    def peek(self, session: SessionContext, name: str) -> Optional[ViewState]:
        with self._lock:
            entry = self._sessions.get(session.key)
            return entry.views.get(name) if entry else None

    def shell(self, session: SessionContext) -> ShellState:
        with self._lock:
            return self._touch(session).shell

    def drop_session(self, session: SessionContext) -> None:
        """Unmount every view of *session* (logout)."""
        with self._lock:
            entry = self._sessions.pop(session.key, None)
        if entry is not None:
            logger.trace("Unmounting %s views on logout", len(entry.views))
            entry.unmount_all()
