"""Base Pydantic schemas with common patterns.

Every schema in the package derives from BaseSchema so the wire format is
consistent: camelCase on the wire (``nodeId``, ``createdAt``), snake_case in
Python, with both spellings accepted on input.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseSchema(BaseModel):
    """Base schema with common configuration for all schemas."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        from_attributes=True,
        populate_by_name=True,
    )

    def to_wire(self) -> dict[str, Any]:
        """Dump to a JSON-compatible dict using wire (camelCase) names."""
        return self.model_dump(mode="json", by_alias=True)


__all__ = [
    "BaseSchema",
]
