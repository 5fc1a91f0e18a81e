"""Client configuration, usually read from the environment."""

from __future__ import annotations

import os
from typing import Mapping, Optional

from pydantic import BaseModel, SecretStr

from .exceptions import FederationAdminError


class ClientConfig(BaseModel):
    api_url: str
    auth_url: Optional[str] = None
    client_id: Optional[str] = None
    client_secret: Optional[SecretStr] = None
    scope: str = "email"
    username: Optional[str] = None
    timeout: float = 30.0

    @property
    def has_credentials(self) -> bool:
        return bool(self.auth_url and self.client_id and self.client_secret and self.client_secret.get_secret_value())

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> ClientConfig:
        """Build a config from ``API_URL``, ``AUTH_URL``, ``CLIENT_ID``, ``CLIENT_SECRET``.

        ``AUTH_SCOPE``, ``ACCOUNT_USERNAME`` and ``HTTP_TIMEOUT`` are optional.
        """
        env = os.environ if environ is None else environ
        api_url = env.get("API_URL")
        if not api_url:
            raise FederationAdminError("API_URL is not set")
        values: dict[str, object] = {
            "api_url": api_url,
            "auth_url": env.get("AUTH_URL") or None,
            "client_id": env.get("CLIENT_ID") or None,
            "client_secret": env.get("CLIENT_SECRET") or None,
            "username": env.get("ACCOUNT_USERNAME") or None,
        }
        if env.get("AUTH_SCOPE"):
            values["scope"] = env["AUTH_SCOPE"]
        if env.get("HTTP_TIMEOUT"):
            values["timeout"] = env["HTTP_TIMEOUT"]
        return cls.model_validate(values)
