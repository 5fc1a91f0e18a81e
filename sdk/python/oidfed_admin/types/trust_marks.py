from __future__ import annotations

from typing import Optional

from pydantic import Field

from .common import ApiModel, Id


class TrustMarkType(ApiModel):
    id: Optional[Id] = None
    identifier: Optional[str] = None
    created_at: Optional[str] = None


class TrustMark(ApiModel):
    id: Optional[Id] = None
    trust_mark_id: Optional[str] = None
    sub: Optional[str] = None
    iat: Optional[int] = None
    exp: Optional[int] = None
    logo_uri: Optional[str] = None
    ref: Optional[str] = None
    delegation: Optional[str] = None
    created_at: Optional[str] = None


class ReceivedTrustMark(ApiModel):
    id: Optional[Id] = None
    # Sent snake_case by the admin API for this resource.
    trust_mark_id: Optional[str] = Field(default=None, alias="trust_mark_id")
    jwt: Optional[str] = None
    created_at: Optional[str] = None
