from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

from .._http import segment
from ..types.trust_marks import ReceivedTrustMark, TrustMark, TrustMarkType
from .entity_statement import PublishResult

if TYPE_CHECKING:
    from .._http import HttpClient


class TrustMarkTypesService:
    def __init__(self, http: HttpClient) -> None:
        self._http = http

    def list(self, account: Optional[str] = None) -> list[TrustMarkType]:
        data = self._http.get("/trust-mark-types", account=account)
        return [TrustMarkType.model_validate(t) for t in data["trustMarkTypes"]]

    def get(self, identifier: Any, account: Optional[str] = None) -> TrustMarkType:
        data = self._http.get(f"/trust-mark-types/{segment(identifier)}", account=account)
        return TrustMarkType.model_validate(data)

    def create(self, identifier: str, account: Optional[str] = None) -> TrustMarkType:
        data = self._http.post("/trust-mark-types", json={"identifier": identifier}, account=account)
        return TrustMarkType.model_validate(data)

    def delete(self, identifier: Any, account: Optional[str] = None) -> Any:
        return self._http.delete(f"/trust-mark-types/{segment(identifier)}", account=account)

    # --- Issuers ---

    def list_issuers(self, identifier: Any, account: Optional[str] = None) -> list[str]:
        data = self._http.get(f"/trust-mark-types/{segment(identifier)}/issuers", account=account)
        return list(data["issuers"])

    def add_issuer(self, identifier: Any, issuer_id: str, account: Optional[str] = None) -> Any:
        return self._http.post(
            f"/trust-mark-types/{segment(identifier)}/issuers", json={"identifier": issuer_id}, account=account
        )

    def remove_issuer(self, identifier: Any, issuer_id: str, account: Optional[str] = None) -> Any:
        return self._http.delete(
            f"/trust-mark-types/{segment(identifier)}/issuers/{segment(issuer_id)}", account=account
        )


class TrustMarksService:
    """Trust marks this account issues to other entities."""

    def __init__(self, http: HttpClient) -> None:
        self._http = http

    def issue(self, trust_mark: dict[str, Any], dry_run: bool = False, account: Optional[str] = None) -> PublishResult:
        body = dict(trust_mark)
        if dry_run:
            body["dryRun"] = True
        return self._http.post("/trust-marks", json=body, account=account)

    def list(self, account: Optional[str] = None) -> list[TrustMark]:
        data = self._http.get("/trust-marks", account=account)
        return [TrustMark.model_validate(t) for t in data["trustMarks"]]

    def delete(self, trust_mark_id: Any, account: Optional[str] = None) -> Any:
        return self._http.delete(f"/trust-marks/{segment(trust_mark_id)}", account=account)


class ReceivedTrustMarksService:
    """Trust marks other issuers granted to this account."""

    def __init__(self, http: HttpClient) -> None:
        self._http = http

    def list(self, account: Optional[str] = None) -> list[ReceivedTrustMark]:
        data = self._http.get("/received-trust-marks", account=account)
        return [ReceivedTrustMark.model_validate(t) for t in data["receivedTrustMarks"]]

    def add(self, trust_mark_id: str, jwt: str, account: Optional[str] = None) -> ReceivedTrustMark:
        data = self._http.post(
            "/received-trust-marks", json={"trust_mark_id": trust_mark_id, "jwt": jwt}, account=account
        )
        return ReceivedTrustMark.model_validate(data)

    def delete(self, trust_mark_id: Any, account: Optional[str] = None) -> Any:
        return self._http.delete(f"/received-trust-marks/{segment(trust_mark_id)}", account=account)
