from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Optional

from ..exceptions import AuthenticationError, FederationAdminError, UnauthenticatedError
from ..types.auth import TokenRequest, TokenResponse

if TYPE_CHECKING:
    from .._http import HttpClient
    from ..session import Session

logger = logging.getLogger(__name__)

RenewalErrorHandler = Callable[[FederationAdminError], None]


class AuthService:
    """OAuth2 client-credentials login with self-rescheduling renewal.

    Credentials live only in the renewal closure; nothing here exposes them.
    """

    def __init__(
        self,
        http: HttpClient,
        session: Session,
        on_renewal_error: Optional[RenewalErrorHandler] = None,
    ) -> None:
        self._http = http
        self._session = session
        self._on_renewal_error = on_renewal_error

    def authenticate(
        self,
        token_endpoint: str,
        client_id: str,
        client_secret: str,
        scope: Optional[str] = "email",
    ) -> str:
        """Exchange client credentials for a bearer token and schedule its renewal.

        The renewal fires ``expires_in`` seconds after this call and repeats
        the same exchange, replacing any renewal already pending.

        Returns:
            The bearer token now held by the session.

        Raises:
            AuthenticationError: The token endpoint answered non-2xx, or its
                body carried no ``access_token``.
            TransportError: The token endpoint could not be reached.
            UnauthenticatedError: ``quit()`` ran while the exchange was in flight.
        """
        token = self._exchange(self._session.generation, token_endpoint, client_id, client_secret, scope)
        if token is None:
            raise UnauthenticatedError("Session was closed during authentication")
        return token

    def _exchange(
        self,
        generation: int,
        token_endpoint: str,
        client_id: str,
        client_secret: str,
        scope: Optional[str],
    ) -> Optional[str]:
        """Run one token exchange for ``generation``; returns None if the session quit meanwhile."""
        form = TokenRequest(client_id=client_id, client_secret=client_secret, scope=scope)
        resp = self._http.post_form(token_endpoint, data=form.model_dump(exclude_none=True))
        if not resp.is_success:
            logger.error(
                "Authentication failed",
                extra={"status_code": resp.status_code, "token_endpoint": token_endpoint, "client_id": client_id},
            )
            raise AuthenticationError(resp.status_code)
        try:
            token = TokenResponse.model_validate(resp.json())
        except ValueError as e:
            logger.error(
                "Token endpoint returned an unusable body",
                extra={"status_code": resp.status_code, "token_endpoint": token_endpoint, "error": str(e)},
            )
            raise AuthenticationError(resp.status_code, "Token response has no access_token") from e

        if not self._session.set_token(token.access_token, expected_generation=generation):
            logger.info("Session quit during token exchange; token discarded", extra={"client_id": client_id})
            return None
        if token.expires_in is not None and token.expires_in > 0:
            self._session.schedule_renewal(
                token.expires_in,
                lambda: self._renew(generation, token_endpoint, client_id, client_secret, scope),
                expected_generation=generation,
            )
        else:
            logger.warning(
                "Token response has no expires_in; renewal not scheduled",
                extra={"token_endpoint": token_endpoint, "client_id": client_id},
            )
        logger.info(
            "Authenticated",
            extra={"token_endpoint": token_endpoint, "client_id": client_id, "expires_in": token.expires_in},
        )
        return token.access_token

    def _renew(
        self,
        generation: int,
        token_endpoint: str,
        client_id: str,
        client_secret: str,
        scope: Optional[str],
    ) -> None:
        if self._session.generation != generation:
            # quit() ran after this renewal was scheduled
            return
        try:
            self._exchange(generation, token_endpoint, client_id, client_secret, scope)
        except FederationAdminError as e:
            logger.exception("Token renewal failed", extra={"token_endpoint": token_endpoint, "client_id": client_id})
            if self._on_renewal_error is not None:
                self._on_renewal_error(e)

    def set_username(self, username: Optional[str]) -> None:
        self._session.set_default_account(username)

    def set_token(self, token: str) -> None:
        self._session.set_token(token)

    def quit(self) -> None:
        self._session.quit()
        logger.info("Session closed")
