"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from superellipse.engine.config import DEFAULT_CONFIG
from superellipse.models.shape import RenderStyle


class ShapeRequest(BaseModel):
    a: float = Field(..., description="Semi-axis along x")
    b: float = Field(..., description="Semi-axis along y")
    n: float = Field(..., description="Shape exponent (2 = ellipse)")


class SampleRequest(ShapeRequest):
    segments: int = Field(
        default=DEFAULT_CONFIG.sample_segments,
        description="Sample count, capped by server settings",
    )


class PathRequest(SampleRequest):
    precision: int = Field(
        default=DEFAULT_CONFIG.path_precision,
        ge=0,
        le=DEFAULT_CONFIG.max_path_precision,
        description="Decimal digits per coordinate",
    )
    close: bool = Field(default=True, description="Append a close-path command")


class SvgRequest(ShapeRequest):
    segments: int = Field(
        default=DEFAULT_CONFIG.document_segments,
        description="Sample count, capped by server settings",
    )
    style: RenderStyle = Field(default_factory=RenderStyle)
