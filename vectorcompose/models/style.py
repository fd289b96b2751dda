"""Presentation attributes carried by diagram primitives for renderers."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Style(BaseModel):
    """Paint attributes of one primitive. The core never reads these."""

    model_config = ConfigDict(frozen=True)

    fill: str | None = None
    stroke: str | None = "black"
    stroke_width: float = Field(default=1.0, ge=0.0)
    opacity: float = Field(default=1.0, ge=0.0, le=1.0)
    attributes: dict[str, str] = Field(default_factory=dict)
