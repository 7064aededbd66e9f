"""
Error taxonomy shared by the API client layer and the views.
"""
from typing import Optional


class ApiError(Exception):
    """Base class for every failure talking to the backend REST API."""

    def __init__(self, message: str, *, method: str = "", path: str = "") -> None:
        super().__init__(message)
        self.message = message
        self.method = method
        self.path = path


class ApiTransportError(ApiError):
    """The request never produced a response (connection refused, timeout...)."""


class ApiStatusError(ApiError):
    """The backend answered with a non-success status code."""

    def __init__(
        self,
        status_code: int,
        message: str,
        *,
        server_message: Optional[str] = None,
        method: str = "",
        path: str = "",
    ) -> None:
        super().__init__(message, method=method, path=path)
        self.status_code = status_code
        # Message supplied by the backend body, if any
        self.server_message = server_message


class ApiResponseError(ApiError):
    """The backend answered but the body does not match the expected schema."""


class ImageValidationError(ValueError):
    """A selected file was rejected before reaching the network."""

    TYPE = "type"
    SIZE = "size"

    def __init__(self, reason: str, message: str) -> None:
        super().__init__(message)
        self.reason = reason
        self.message = message


class LoginRequired(Exception):
    """Raised by the session guard when no token is stored."""

    def __init__(self, next_path: str = "") -> None:
        super().__init__("Login required")
        self.next_path = next_path
