"""Internal HTTP transport for the OpenID Federation admin SDK."""

from __future__ import annotations

import logging
from typing import Any, Optional
from urllib.parse import quote

import httpx

from .exceptions import (
    BadRequestError,
    ConflictError,
    ForbiddenError,
    HttpError,
    NotFoundError,
    RateLimitError,
    TransportError,
    UnauthenticatedError,
    UnauthorizedError,
)
from .session import Session

logger = logging.getLogger(__name__)

ACCOUNT_HEADER = "X-Account-Username"

_ERROR_MAP: dict[int, type[HttpError]] = {
    400: BadRequestError,
    401: UnauthorizedError,
    403: ForbiddenError,
    404: NotFoundError,
    409: ConflictError,
    429: RateLimitError,
}


def segment(value: Any) -> str:
    """Percent-encode one path segment, slashes included."""
    return quote(str(value), safe="")


class HttpClient:
    """Low-level HTTP client wrapping httpx."""

    def __init__(
        self,
        session: Session,
        timeout: float = 30.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._session = session
        self._client = httpx.Client(timeout=timeout, transport=transport)

    @property
    def base_url(self) -> str:
        return self._session.base_url

    def _headers(self, account: Optional[str]) -> dict[str, str]:
        token = self._session.token
        if not token:
            logger.error("Request attempted without a bearer token")
            raise UnauthenticatedError()
        headers: dict[str, str] = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {token}",
        }
        username = account or self._session.default_account
        if username:
            headers[ACCOUNT_HEADER] = username
        return headers

    def _handle_response(self, method: str, path: str, resp: httpx.Response) -> Any:
        if not resp.is_success:
            logger.error(
                "API error",
                extra={
                    "status_code": resp.status_code,
                    "method": method,
                    "endpoint": path,
                    "response_body": resp.text,
                },
            )
            cls = _ERROR_MAP.get(resp.status_code)
            if cls is None:
                raise HttpError(resp.status_code, resp.text)
            raise cls(resp.text)
        if resp.status_code == 204 or not resp.content:
            return None
        content_type = resp.headers.get("content-type", "").split(";")[0].strip().lower()
        if content_type == "application/json":
            return resp.json()
        return resp.text

    def _ensure_open(self) -> None:
        if self._client.is_closed:
            logger.error("Request attempted on a closed client")
            raise TransportError("HTTP client is closed")

    def request(
        self,
        method: str,
        path: str,
        json: Any = None,
        params: Optional[dict[str, Any]] = None,
        account: Optional[str] = None,
    ) -> Any:
        self._ensure_open()
        url = f"{self.base_url}{path}"
        headers = self._headers(account)
        try:
            resp = self._client.request(method, url, headers=headers, json=json, params=params)
        except httpx.HTTPError as e:
            logger.error("No response from API", extra={"method": method, "endpoint": path, "error": str(e)})
            raise TransportError(f"Request failed: {e}") from e
        return self._handle_response(method, path, resp)

    def get(self, path: str, params: Optional[dict[str, Any]] = None, account: Optional[str] = None) -> Any:
        return self.request("GET", path, params=params, account=account)

    def post(self, path: str, json: Any = None, account: Optional[str] = None) -> Any:
        return self.request("POST", path, json=json, account=account)

    def delete(self, path: str, params: Optional[dict[str, Any]] = None, account: Optional[str] = None) -> Any:
        return self.request("DELETE", path, params=params, account=account)

    def post_form(self, url: str, data: dict[str, Any]) -> httpx.Response:
        """POST a form to an absolute URL without session headers; the caller inspects the status."""
        self._ensure_open()
        try:
            return self._client.post(
                url,
                headers={"Content-Type": "application/x-www-form-urlencoded"},
                data=data,
            )
        except httpx.HTTPError as e:
            logger.error("No response from token endpoint", extra={"url": url, "error": str(e)})
            raise TransportError(f"Request failed: {e}") from e

    def close(self) -> None:
        self._client.close()
