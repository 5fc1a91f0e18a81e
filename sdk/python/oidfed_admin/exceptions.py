"""OpenID Federation admin SDK exceptions."""

from __future__ import annotations

from typing import Optional


class FederationAdminError(Exception):
    """Base exception for all SDK errors."""


class TransportError(FederationAdminError):
    """No response was received (connection refused, DNS, timeout...)."""


class UnauthenticatedError(FederationAdminError):
    """A request needed a bearer token but the session holds none."""

    def __init__(self, message: str = "Not authenticated; call authenticate() or set_token() first") -> None:
        super().__init__(message)


class AuthenticationError(FederationAdminError):
    """The OAuth2 token endpoint refused the client credentials."""

    def __init__(self, status_code: Optional[int] = None, message: str = "Authentication failed") -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"{message} (status: {status_code})" if status_code is not None else message)


class HttpError(FederationAdminError):
    """Admin API returned a non-2xx response."""

    def __init__(self, status_code: int, body: str = "") -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"HTTP error! Status code: {status_code}" + (f": {body}" if body else ""))


class BadRequestError(HttpError):
    """400 Bad Request."""

    def __init__(self, body: str = "") -> None:
        super().__init__(400, body)


class UnauthorizedError(HttpError):
    """401 Unauthorized."""

    def __init__(self, body: str = "") -> None:
        super().__init__(401, body)


class ForbiddenError(HttpError):
    """403 Forbidden."""

    def __init__(self, body: str = "") -> None:
        super().__init__(403, body)


class NotFoundError(HttpError):
    """404 Not Found."""

    def __init__(self, body: str = "") -> None:
        super().__init__(404, body)


class ConflictError(HttpError):
    """409 Conflict."""

    def __init__(self, body: str = "") -> None:
        super().__init__(409, body)


class RateLimitError(HttpError):
    """429 Too Many Requests."""

    def __init__(self, body: str = "") -> None:
        super().__init__(429, body)
