from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict

from .common import ApiModel, Id


class Jwk(BaseModel):
    """A JSON Web Key; members keep their RFC 7517 names."""

    model_config = ConfigDict(extra="allow")

    id: Optional[Id] = None
    kid: Optional[str] = None
    kty: Optional[str] = None
    alg: Optional[str] = None
    use: Optional[str] = None
    crv: Optional[str] = None
    x: Optional[str] = None
    y: Optional[str] = None
    n: Optional[str] = None
    e: Optional[str] = None
    x5c: Optional[list[str]] = None
    x5t: Optional[str] = None
    x5u: Optional[str] = None


class CreateKeyRequest(ApiModel):
    kms_key_ref: Optional[str] = None
    signature_algorithm: str = "ES256"
