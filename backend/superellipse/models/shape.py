"""Value types shared by the engine and the API."""

from __future__ import annotations

from typing import NamedTuple

from pydantic import BaseModel, ConfigDict, Field

from superellipse.engine.config import DEFAULT_CONFIG


class Point(NamedTuple):
    x: float
    y: float


class ShapeParameters(BaseModel):
    """Superellipse parameters. Positivity is checked by the sampler, not here."""

    model_config = ConfigDict(frozen=True)

    a: float = Field(..., description="Semi-axis along x")
    b: float = Field(..., description="Semi-axis along y")
    n: float = Field(..., description="Shape exponent (2 = ellipse)")
    segments: int = Field(
        default=DEFAULT_CONFIG.document_segments,
        description="Sample count, floored and clamped to >= 4",
    )


class RenderStyle(BaseModel):
    model_config = ConfigDict(frozen=True)

    stroke: str = "black"
    stroke_width: float = Field(default=1.0, ge=0)
    fill: str = "none"
    width_px: float | None = None
    height_px: float | None = None
    padding: float = 0.0
    precision: int = Field(default=DEFAULT_CONFIG.path_precision, ge=0, le=DEFAULT_CONFIG.max_path_precision)


class BoundingBox(BaseModel):
    model_config = ConfigDict(frozen=True)

    min_x: float
    max_x: float
    min_y: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    def contains(self, x: float, y: float) -> bool:
        return self.min_x <= x <= self.max_x and self.min_y <= y <= self.max_y

    def inflate(self, amount: float) -> BoundingBox:
        """Grow every side by `amount`."""
        return BoundingBox(
            min_x=self.min_x - amount,
            max_x=self.max_x + amount,
            min_y=self.min_y - amount,
            max_y=self.max_y + amount,
        )
