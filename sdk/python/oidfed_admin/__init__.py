"""OpenID Federation admin Python SDK."""

from .client import FederationAdminClient
from .config import ClientConfig
from .exceptions import (
    AuthenticationError,
    BadRequestError,
    ConflictError,
    FederationAdminError,
    ForbiddenError,
    HttpError,
    NotFoundError,
    RateLimitError,
    TransportError,
    UnauthenticatedError,
    UnauthorizedError,
)
from .session import Session
from .types.system import LogSeverity

__all__ = [
    "FederationAdminClient",
    "ClientConfig",
    "Session",
    "LogSeverity",
    "FederationAdminError",
    "TransportError",
    "UnauthenticatedError",
    "AuthenticationError",
    "HttpError",
    "BadRequestError",
    "UnauthorizedError",
    "ForbiddenError",
    "NotFoundError",
    "ConflictError",
    "RateLimitError",
]
