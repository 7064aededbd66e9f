"""
Repository for the admin login exchange.
"""
import logging

from visconti_admin.clients.api_client import ApiClient, parse
from visconti_admin.schemas.auth import LoginRequest, LoginResponse

logger = logging.getLogger(__name__)

LOGIN_PATH = "api/admin/login"


class AuthRepository:
    def __init__(self, client: ApiClient) -> None:
        logger.trace("Initializing AuthRepository")
        self._client = client

    def login(self, credentials: LoginRequest) -> str:
        """Exchange credentials for a token."""
        logger.trace("Posting login for username=%s", credentials.username)
        body = self._client.post(LOGIN_PATH, json=credentials.model_dump())
        return parse(body, LoginResponse).token
