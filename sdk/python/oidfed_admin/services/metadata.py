from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

from .._http import segment
from ..types.metadata import MetadataEntry

if TYPE_CHECKING:
    from .._http import HttpClient


class MetadataService:
    def __init__(self, http: HttpClient) -> None:
        self._http = http

    def create(self, body: dict[str, Any], account: Optional[str] = None) -> MetadataEntry:
        """Add an entity configuration metadata entry, e.g. ``{"key": "federation_entity", "metadata": {...}}``."""
        return MetadataEntry.model_validate(self._http.post("/metadata", json=body, account=account))

    def list(self, account: Optional[str] = None) -> list[MetadataEntry]:
        data = self._http.get("/metadata", account=account)
        return [MetadataEntry.model_validate(m) for m in data["metadata"]]

    def delete(self, entry_id: Any, account: Optional[str] = None) -> Any:
        return self._http.delete(f"/metadata/{segment(entry_id)}", account=account)
