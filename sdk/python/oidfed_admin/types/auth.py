from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict


class TokenRequest(BaseModel):
    grant_type: str = "client_credentials"
    client_id: str
    client_secret: str
    scope: Optional[str] = None


class TokenResponse(BaseModel):
    model_config = ConfigDict(extra="allow")

    access_token: str
    token_type: Optional[str] = None
    expires_in: Optional[float] = None
    scope: Optional[str] = None
