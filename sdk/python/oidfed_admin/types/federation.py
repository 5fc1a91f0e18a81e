from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict

from .common import ApiModel, Id


class AuthorityHint(ApiModel):
    id: Optional[Id] = None
    identifier: Optional[str] = None
    created_at: Optional[str] = None


class Subordinate(ApiModel):
    id: Optional[Id] = None
    identifier: Optional[str] = None
    created_at: Optional[str] = None


class PublishStatementRequest(ApiModel):
    kms_key_ref: Optional[str] = None
    kid: Optional[str] = None
    dry_run: bool = False


class EntityStatement(BaseModel):
    """Unsigned entity configuration or subordinate statement.

    Claim names follow OpenID Federation 1.0 and are snake_case on the wire.
    """

    model_config = ConfigDict(extra="allow")

    iss: Optional[str] = None
    sub: Optional[str] = None
    iat: Optional[int] = None
    exp: Optional[int] = None
    jwks: Optional[dict[str, Any]] = None
    metadata: Optional[dict[str, Any]] = None
    metadata_policy: Optional[dict[str, Any]] = None
    authority_hints: Optional[list[str]] = None
    trust_marks: Optional[list[dict[str, Any]]] = None
    trust_mark_issuers: Optional[dict[str, list[str]]] = None
    crit: Optional[list[str]] = None
    source_endpoint: Optional[str] = None
