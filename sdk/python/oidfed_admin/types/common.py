from __future__ import annotations

from typing import Union

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

# Server-side row ids are integers; some deployments expose UUIDs.
Id = Union[int, str]


class ApiModel(BaseModel):
    """Admin API payload: camelCase on the wire, unknown fields kept."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")
