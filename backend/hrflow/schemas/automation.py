"""Pydantic schemas for the automation action catalog."""

from __future__ import annotations

from pydantic import Field

from hrflow.schemas.base import BaseSchema


class AutomationAction(BaseSchema):
    """A named automation the designer can attach to an automated step."""

    id: str = Field(..., examples=["send_email"])
    label: str = Field(..., examples=["Send Email"])
    description: str | None = None
    params: list[str] = Field(
        default_factory=list,
        description="Parameter names the action accepts",
        examples=[["to", "subject", "body"]],
    )


__all__ = ["AutomationAction"]
