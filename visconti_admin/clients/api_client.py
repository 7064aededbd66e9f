"""
Thin HTTP wrapper around the backend REST API.

Every request goes to ``BACKEND_URI`` + relative path and returns the decoded
JSON body. Transport failures and non-success statuses are converted to the
ApiError hierarchy; response bodies are validated against pydantic schemas
with :func:`parse` before they reach any view state.
"""
from typing import Any, Optional
import logging

import requests
from pydantic import TypeAdapter, ValidationError

from visconti_admin.core.exceptions import (
    ApiResponseError,
    ApiStatusError,
    ApiTransportError,
)
from visconti_admin.core.logging_config import log_api_timing

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {
    "Accept": "application/json",
}


def join_url(base_uri: str, path: str) -> str:
    """Join *path* onto *base_uri* with exactly one slash between them."""
    return f"{base_uri.rstrip('/')}/{path.lstrip('/')}"


def parse(payload: Any, schema: Any) -> Any:
    """
    Validate *payload* against *schema* (a model class or a typing construct
    such as ``list[Model]``).

    Raises:
        ApiResponseError: if the payload does not match the schema.
    """
    try:
        return TypeAdapter(schema).validate_python(payload)
    except ValidationError as e:
        logger.error("Response failed schema validation: %s", e)
        raise ApiResponseError(f"Malformed response: {e.error_count()} error(s)")


class ApiClient:
    """Issue GET/POST/PUT/DELETE requests against the configured backend."""

    def __init__(
        self,
        base_uri: str,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        logger.trace("Initializing ApiClient base_uri=%s", base_uri)
        self.base_uri = base_uri
        self.timeout = timeout
        self._session = session or requests.Session()
        self._session.headers.update(DEFAULT_HEADERS)

    # ------------------------------------------------------------------
    # Verbs
    # ------------------------------------------------------------------

    def get(self, path: str) -> Any:
        return self.request("GET", path)

    def post(
        self,
        path: str,
        json: Optional[dict] = None,
        files: Optional[dict] = None,
    ) -> Any:
        return self.request("POST", path, json=json, files=files)

    def put(self, path: str, files: Optional[dict] = None) -> Any:
        return self.request("PUT", path, files=files)

    def delete(self, path: str) -> Any:
        return self.request("DELETE", path)

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    @log_api_timing
    def request(self, method: str, path: str, **kwargs) -> Any:
        """
        Send one request and return the decoded JSON body, or None when the
        response has no body. No retry is attempted.
        """
        url = join_url(self.base_uri, path)
        body_kwargs = {k: v for k, v in kwargs.items() if v is not None}
        try:
            resp = self._session.request(
                method, url, timeout=self.timeout, **body_kwargs
            )
        except requests.RequestException as e:
            raise ApiTransportError(str(e), method=method, path=path)

        if resp.status_code >= 400:
            server_message = _server_message(resp)
            raise ApiStatusError(
                resp.status_code,
                f"HTTP {resp.status_code}",
                server_message=server_message,
                method=method,
                path=path,
            )

        if resp.status_code == 204 or not resp.content:
            return None
        try:
            return resp.json()
        except ValueError:
            raise ApiResponseError(
                "Response body is not JSON", method=method, path=path
            )


def _server_message(resp: requests.Response) -> Optional[str]:
    """Return the ``message`` field of a JSON error body, if present."""
    try:
        body = resp.json()
    except ValueError:
        return None
    if isinstance(body, dict) and isinstance(body.get("message"), str):
        return body["message"]
    return None
