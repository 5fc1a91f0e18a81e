from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

from .._http import segment
from ..types.keys import CreateKeyRequest, Jwk

if TYPE_CHECKING:
    from .._http import HttpClient


class KeysService:
    def __init__(self, http: HttpClient) -> None:
        self._http = http

    def create(
        self,
        kms_key_ref: Optional[str] = None,
        signature_algorithm: str = "ES256",
        account: Optional[str] = None,
    ) -> Jwk:
        body = CreateKeyRequest(kms_key_ref=kms_key_ref, signature_algorithm=signature_algorithm)
        data = self._http.post("/keys", json=body.model_dump(by_alias=True), account=account)
        return Jwk.model_validate(data)

    def list(self, account: Optional[str] = None) -> list[Jwk]:
        data = self._http.get("/keys", account=account)
        return [Jwk.model_validate(k) for k in data["jwks"]]

    def delete(self, key_id: Any, reason: Optional[str] = None, account: Optional[str] = None) -> Any:
        params = {"reason": reason} if reason is not None else None
        return self._http.delete(f"/keys/{segment(key_id)}", params=params, account=account)
