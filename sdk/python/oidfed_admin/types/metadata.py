from __future__ import annotations

from typing import Any, Optional

from .common import ApiModel, Id


class MetadataEntry(ApiModel):
    id: Optional[Id] = None
    key: Optional[str] = None
    metadata: Optional[dict[str, Any]] = None
    created_at: Optional[str] = None


class SubordinateMetadata(MetadataEntry):
    subordinate_id: Optional[Id] = None
