"""Tests for environment configuration and client construction."""

import httpx
import pytest
from conftest import form

from oidfed_admin import (
    AuthenticationError,
    ClientConfig,
    FederationAdminClient,
    FederationAdminError,
    TransportError,
)

ENV = {
    "API_URL": "https://admin.test",
    "AUTH_URL": "https://idp.test/oauth/token",
    "CLIENT_ID": "client",
    "CLIENT_SECRET": "secret",
}


class TestClientConfig:
    def test_from_env(self) -> None:
        config = ClientConfig.from_env(ENV)

        assert config.api_url == "https://admin.test"
        assert config.scope == "email"
        assert config.timeout == 30.0
        assert config.has_credentials

    def test_optional_values(self) -> None:
        config = ClientConfig.from_env(
            {**ENV, "AUTH_SCOPE": "openid", "ACCOUNT_USERNAME": "acme", "HTTP_TIMEOUT": "5"}
        )

        assert config.scope == "openid"
        assert config.username == "acme"
        assert config.timeout == 5.0

    def test_missing_api_url(self) -> None:
        with pytest.raises(FederationAdminError):
            ClientConfig.from_env({"AUTH_URL": "https://idp.test"})

    def test_incomplete_credentials(self) -> None:
        config = ClientConfig.from_env({"API_URL": "https://admin.test", "CLIENT_ID": "client"})

        assert not config.has_credentials

    def test_secret_is_masked(self) -> None:
        config = ClientConfig.from_env({**ENV, "CLIENT_SECRET": "hunter2"})

        assert "hunter2" not in repr(config)
        assert "hunter2" not in str(config)
        assert "hunter2" not in str(config.model_dump())
        assert "hunter2" not in config.model_dump_json()
        assert config.client_secret.get_secret_value() == "hunter2"

    def test_empty_secret_is_not_a_credential(self) -> None:
        config = ClientConfig(api_url="https://admin.test", auth_url="https://idp.test", client_id="c", client_secret="")

        assert not config.has_credentials


class TestFromConfig:
    def test_authenticates_and_sets_username(self, server, timers) -> None:
        server.route("GET", "/metadata", httpx.Response(200, json={"metadata": []}))
        config = ClientConfig.from_env({**ENV, "ACCOUNT_USERNAME": "acme", "AUTH_SCOPE": "admin"})

        with FederationAdminClient.from_config(
            config, transport=httpx.MockTransport(server.handle), timer_factory=timers
        ) as client:
            assert client.is_authenticated
            assert form(server.requests[0])["scope"] == "admin"
            assert form(server.requests[0])["client_secret"] == "secret"
            client.metadata.list()
            assert server.last.headers["X-Account-Username"] == "acme"

        assert timers.pending == []

    def test_without_credentials_stays_anonymous(self, server, timers) -> None:
        config = ClientConfig.from_env({"API_URL": "https://admin.test"})

        with FederationAdminClient.from_config(
            config, transport=httpx.MockTransport(server.handle), timer_factory=timers
        ) as client:
            assert not client.is_authenticated

        assert server.requests == []

    def test_failed_authentication_closes_client(self, server, timers, monkeypatch) -> None:
        closed = []
        close = FederationAdminClient.close

        def recording_close(self) -> None:
            closed.append(self)
            close(self)

        monkeypatch.setattr(FederationAdminClient, "close", recording_close)
        server.token_responses.append(httpx.Response(401, json={"error": "invalid_client"}))

        with pytest.raises(AuthenticationError):
            FederationAdminClient.from_config(
                ClientConfig.from_env(ENV), transport=httpx.MockTransport(server.handle), timer_factory=timers
            )

        assert len(closed) == 1
        closed[0].set_token("t")
        with pytest.raises(TransportError):
            closed[0].system.status()
