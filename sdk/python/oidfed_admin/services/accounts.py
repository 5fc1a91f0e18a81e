from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

from ..types.accounts import Account, CreateAccountRequest

if TYPE_CHECKING:
    from .._http import HttpClient


class AccountsService:
    def __init__(self, http: HttpClient) -> None:
        self._http = http

    def list(self) -> list[Account]:
        data = self._http.get("/accounts")
        return [Account.model_validate(a) for a in data["accounts"]]

    def create(self, username: str, identifier: Optional[str] = None) -> Account:
        body = CreateAccountRequest(username=username, identifier=identifier)
        return Account.model_validate(self._http.post("/accounts", json=body.model_dump(by_alias=True)))

    def delete(self, username: str) -> Any:
        """Delete the account named by ``username``; the API reads it from the account header."""
        return self._http.delete("/accounts", account=username)
