from __future__ import annotations

from typing import Optional

from .common import ApiModel, Id


class Account(ApiModel):
    id: Optional[Id] = None
    username: Optional[str] = None
    identifier: Optional[str] = None


class CreateAccountRequest(ApiModel):
    username: str
    identifier: Optional[str] = None
