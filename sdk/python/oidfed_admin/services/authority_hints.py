from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

from .._http import segment
from ..types.federation import AuthorityHint

if TYPE_CHECKING:
    from .._http import HttpClient


class AuthorityHintsService:
    def __init__(self, http: HttpClient) -> None:
        self._http = http

    def add(self, identifier: str, account: Optional[str] = None) -> AuthorityHint:
        data = self._http.post("/authority-hints", json={"identifier": identifier}, account=account)
        return AuthorityHint.model_validate(data)

    def list(self, account: Optional[str] = None) -> list[AuthorityHint]:
        data = self._http.get("/authority-hints", account=account)
        return [AuthorityHint.model_validate(h) for h in data["authorityHints"]]

    def delete(self, hint_id: Any, account: Optional[str] = None) -> Any:
        return self._http.delete(f"/authority-hints/{segment(hint_id)}", account=account)
