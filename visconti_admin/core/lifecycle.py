"""
Mount/unmount bookkeeping for view states.

A view issues its load under the token returned by ``mount()``. Once the
view is unmounted (or mounted again) the token is dead and any response that
arrives for it must be dropped instead of applied.
"""
from dataclasses import dataclass, field
import itertools
import logging
import threading

logger = logging.getLogger(__name__)

_generations = itertools.count(1)


@dataclass
class LoadToken:
    generation: int
    _cancelled: threading.Event = field(default_factory=threading.Event, repr=False)

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def cancel(self) -> None:
        self._cancelled.set()


class ViewLifecycle:
    """Tracks the live load token of a single view instance."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._token: LoadToken | None = None

    @property
    def mounted(self) -> bool:
        return self._token is not None and not self._token.cancelled

    def mount(self) -> LoadToken:
        if self._token is not None:
            self._token.cancel()
        self._token = LoadToken(next(_generations))
        logger.trace("Mounted view=%s generation=%s", self.name, self._token.generation)
        return self._token

    def unmount(self) -> None:
        if self._token is not None:
            logger.trace(
                "Unmounted view=%s generation=%s", self.name, self._token.generation
            )
            self._token.cancel()

    def current(self) -> LoadToken:
        """Return the live token, mounting first if needed."""
        if not self.mounted:
            return self.mount()
        return self._token  # type: ignore[return-value]

    def is_live(self, token: LoadToken) -> bool:
        live = token is self._token and not token.cancelled
        if not live:
            logger.info(
                "Discarding stale response for view=%s generation=%s",
                self.name,
                token.generation,
            )
        return live
