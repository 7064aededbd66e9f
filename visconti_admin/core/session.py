"""
Session guard primitives.

Access is gated on the presence of a stored token only: there is no expiry,
no refresh and no server-side check. The token lives behind a
``CredentialStore`` so views and tests never touch the cookie directly.
"""
from dataclasses import dataclass
from typing import Optional, Protocol
import logging

from fastapi import Request, Response

from visconti_admin.core.config import settings

logger = logging.getLogger(__name__)


class CredentialStore(Protocol):
    """Persisted credential storage (one token under a fixed key)."""

    def read(self) -> Optional[str]: ...

    def write(self, token: str) -> None: ...

    def clear(self) -> None: ...

    def apply_to(self, response: Response) -> None: ...


class CookieCredentialStore:
    """Token kept in a browser cookie; writes are staged until ``apply_to``."""

    _UNSET = object()

    def __init__(self, request: Request, cookie_name: str) -> None:
        self._cookie_name = cookie_name
        self._token = request.cookies.get(cookie_name) or None
        self._pending = self._UNSET

    def read(self) -> Optional[str]:
        return self._token

    def write(self, token: str) -> None:
        logger.trace("Staging token cookie write")
        self._token = token
        self._pending = token

    def clear(self) -> None:
        logger.trace("Staging token cookie removal")
        self._token = None
        self._pending = None

    def apply_to(self, response: Response) -> None:
        """Copy staged changes onto *response* as Set-Cookie headers."""
        if self._pending is self._UNSET:
            return
        if self._pending is None:
            response.delete_cookie(self._cookie_name)
        else:
            response.set_cookie(
                self._cookie_name,
                self._pending,
                httponly=True,
                samesite="lax",
                secure=settings.TOKEN_COOKIE_SECURE,
            )


class InMemoryCredentialStore:
    """Process-local store used as a test double."""

    def __init__(self, token: Optional[str] = None) -> None:
        self._token = token

    def read(self) -> Optional[str]:
        return self._token

    def write(self, token: str) -> None:
        self._token = token

    def clear(self) -> None:
        self._token = None

    def apply_to(self, response: Response) -> None:
        return None


@dataclass(frozen=True)
class SessionContext:
    """Explicit session handed to every protected view."""

    token: Optional[str] = None

    @property
    def is_authenticated(self) -> bool:
        return bool(self.token)

    @property
    def key(self) -> str:
        """Key under which this session's view states are kept."""
        return self.token or ""
