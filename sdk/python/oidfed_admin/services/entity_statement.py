from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional, Union

from ..types.federation import EntityStatement, PublishStatementRequest

if TYPE_CHECKING:
    from .._http import HttpClient

# Signed JWT as text, or whatever JSON the server answers with.
PublishResult = Union[str, dict[str, Any]]


class EntityStatementService:
    def __init__(self, http: HttpClient) -> None:
        self._http = http

    def get(self, account: Optional[str] = None) -> EntityStatement:
        return EntityStatement.model_validate(self._http.get("/entity-statement", account=account))

    def publish(
        self,
        kms_key_ref: Optional[str] = None,
        kid: Optional[str] = None,
        dry_run: bool = False,
        account: Optional[str] = None,
    ) -> PublishResult:
        """Sign and publish the entity configuration.

        With ``dry_run`` the server builds the statement without storing it.
        """
        body = PublishStatementRequest(kms_key_ref=kms_key_ref, kid=kid, dry_run=dry_run)
        return self._http.post("/entity-statement", json=body.model_dump(by_alias=True), account=account)
