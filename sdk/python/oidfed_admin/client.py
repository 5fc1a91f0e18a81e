"""OpenID Federation admin SDK client."""

from __future__ import annotations

import threading
from typing import Any, Optional

import httpx

from ._http import HttpClient
from .config import ClientConfig
from .exceptions import FederationAdminError
from .services import (
    AccountsService,
    AuthorityHintsService,
    AuthService,
    EntityStatementService,
    KeysService,
    MetadataService,
    ReceivedTrustMarksService,
    SubordinatesService,
    SystemService,
    TrustMarksService,
    TrustMarkTypesService,
)
from .services.auth import RenewalErrorHandler
from .session import Session, TimerFactory


class FederationAdminClient:
    """Main client for the OpenID Federation admin API.

    Usage:
        client = FederationAdminClient("https://federation.example.com/admin")
        client.authenticate("https://idp.example.com/token", "client-id", "secret")
        client.set_username("acme")
        hints = client.authority_hints.list()
        client.quit()
    """

    def __init__(
        self,
        base_url: str,
        token: Optional[str] = None,
        username: Optional[str] = None,
        timeout: float = 30.0,
        transport: Optional[httpx.BaseTransport] = None,
        timer_factory: TimerFactory = threading.Timer,
        on_renewal_error: Optional[RenewalErrorHandler] = None,
    ) -> None:
        self._session = Session(base_url, token=token, default_account=username, timer_factory=timer_factory)
        self._http = HttpClient(self._session, timeout=timeout, transport=transport)
        self.auth = AuthService(self._http, self._session, on_renewal_error=on_renewal_error)
        self.accounts = AccountsService(self._http)
        self.keys = KeysService(self._http)
        self.metadata = MetadataService(self._http)
        self.authority_hints = AuthorityHintsService(self._http)
        self.entity_statement = EntityStatementService(self._http)
        self.subordinates = SubordinatesService(self._http)
        self.trust_mark_types = TrustMarkTypesService(self._http)
        self.trust_marks = TrustMarksService(self._http)
        self.received_trust_marks = ReceivedTrustMarksService(self._http)
        self.system = SystemService(self._http)

    @classmethod
    def from_config(cls, config: ClientConfig, **kwargs: Any) -> FederationAdminClient:
        """Build a client from ``config``, authenticating when credentials are complete.

        The client is closed again if authentication fails.
        """
        client = cls(config.api_url, username=config.username, timeout=config.timeout, **kwargs)
        if config.has_credentials:
            try:
                client.authenticate(
                    config.auth_url,
                    config.client_id,
                    config.client_secret.get_secret_value(),
                    config.scope,
                )
            except FederationAdminError:
                client.close()
                raise
        return client

    @property
    def session(self) -> Session:
        return self._session

    @property
    def is_authenticated(self) -> bool:
        return self._session.is_authenticated

    def authenticate(
        self,
        token_endpoint: str,
        client_id: str,
        client_secret: str,
        scope: Optional[str] = "email",
    ) -> str:
        """Obtain a bearer token via client credentials; it is renewed before expiry."""
        return self.auth.authenticate(token_endpoint, client_id, client_secret, scope)

    def set_username(self, username: Optional[str]) -> None:
        """Set the default account sent as ``X-Account-Username``."""
        self.auth.set_username(username)

    def set_token(self, token: str) -> None:
        """Set the bearer token for all subsequent requests."""
        self.auth.set_token(token)

    def quit(self) -> None:
        """Drop the bearer token and cancel the pending renewal."""
        self.auth.quit()

    def close(self) -> None:
        """Quit the session and close the underlying HTTP client."""
        self.quit()
        self._http.close()

    def __enter__(self) -> FederationAdminClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"FederationAdminClient(base_url={self._http.base_url!r})"
