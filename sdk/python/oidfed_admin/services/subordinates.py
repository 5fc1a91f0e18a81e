from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

from .._http import segment
from ..types.federation import EntityStatement, PublishStatementRequest, Subordinate
from ..types.keys import Jwk
from ..types.metadata import SubordinateMetadata
from .entity_statement import PublishResult

if TYPE_CHECKING:
    from .._http import HttpClient


class SubordinatesService:
    """Entities this account issues statements for, keyed by entity identifier or row id."""

    def __init__(self, http: HttpClient) -> None:
        self._http = http

    # --- Subordinates ---

    def add(self, identifier: str, account: Optional[str] = None) -> Subordinate:
        data = self._http.post("/subordinates", json={"identifier": identifier}, account=account)
        return Subordinate.model_validate(data)

    def list(self, account: Optional[str] = None) -> list[Subordinate]:
        data = self._http.get("/subordinates", account=account)
        return [Subordinate.model_validate(s) for s in data["subordinates"]]

    def delete(self, subordinate_id: Any, account: Optional[str] = None) -> Any:
        return self._http.delete(f"/subordinates/{segment(subordinate_id)}", account=account)

    # --- Metadata ---

    def add_metadata(self, subordinate_id: Any, body: dict[str, Any], account: Optional[str] = None) -> SubordinateMetadata:
        data = self._http.post(f"/subordinates/{segment(subordinate_id)}/metadata", json=body, account=account)
        return SubordinateMetadata.model_validate(data)

    def list_metadata(self, subordinate_id: Any, account: Optional[str] = None) -> list[SubordinateMetadata]:
        data = self._http.get(f"/subordinates/{segment(subordinate_id)}/metadata", account=account)
        return [SubordinateMetadata.model_validate(m) for m in data["subordinateMetadata"]]

    def delete_metadata(self, subordinate_id: Any, entry_id: Any, account: Optional[str] = None) -> Any:
        return self._http.delete(
            f"/subordinates/{segment(subordinate_id)}/metadata/{segment(entry_id)}", account=account
        )

    # --- Keys ---

    def add_jwk(self, subordinate_id: Any, jwk: dict[str, Any], account: Optional[str] = None) -> Jwk:
        data = self._http.post(f"/subordinates/{segment(subordinate_id)}/keys", json=jwk, account=account)
        return Jwk.model_validate(data)

    def list_jwks(self, subordinate_id: Any, account: Optional[str] = None) -> list[Jwk]:
        data = self._http.get(f"/subordinates/{segment(subordinate_id)}/keys", account=account)
        return [Jwk.model_validate(k) for k in data["jwks"]]

    def delete_jwk(self, subordinate_id: Any, jwk_id: Any, account: Optional[str] = None) -> Any:
        return self._http.delete(f"/subordinates/{segment(subordinate_id)}/keys/{segment(jwk_id)}", account=account)

    # --- Statement ---

    def get_statement(self, subordinate_id: Any, account: Optional[str] = None) -> EntityStatement:
        data = self._http.get(f"/subordinates/{segment(subordinate_id)}/statement", account=account)
        return EntityStatement.model_validate(data)

    def publish_statement(
        self,
        subordinate_id: Any,
        kms_key_ref: Optional[str] = None,
        kid: Optional[str] = None,
        dry_run: bool = False,
        account: Optional[str] = None,
    ) -> PublishResult:
        body = PublishStatementRequest(kms_key_ref=kms_key_ref, kid=kid, dry_run=dry_run)
        return self._http.post(
            f"/subordinates/{segment(subordinate_id)}/statement",
            json=body.model_dump(by_alias=True),
            account=account,
        )
