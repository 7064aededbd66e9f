"""
Transient status message that clears itself after a fixed delay.
"""
from dataclasses import dataclass
from typing import Callable, Optional
import time

IDLE = "idle"
SUCCESS = "success"
ERROR = "error"


@dataclass
class TransientStatus:
    """
    Success/error notice shown by a view. Error messages stay until replaced;
    success messages expire ``ttl`` seconds after they were set.
    """

    ttl: float
    clock: Callable[[], float] = time.monotonic
    kind: str = IDLE
    message: str = ""
    expires_at: Optional[float] = None

    def success(self, message: str) -> None:
        self.kind = SUCCESS
        self.message = message
        self.expires_at = self.clock() + self.ttl

    def error(self, message: str) -> None:
        self.kind = ERROR
        self.message = message
        self.expires_at = None

    def clear(self) -> None:
        self.kind = IDLE
        self.message = ""
        self.expires_at = None

    def current(self) -> "TransientStatus":
        """Drop an expired message, then return self for rendering."""
        if self.expires_at is not None and self.clock() >= self.expires_at:
            self.clear()
        return self
