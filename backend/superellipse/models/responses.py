"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from superellipse.models.shape import BoundingBox


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str


class PointsResponse(BaseModel):
    points: list[tuple[float, float]] = Field(default_factory=list)
    count: int = 0


class PathResponse(BaseModel):
    d: str


class MetricsResponse(BaseModel):
    bounds: BoundingBox
    area: float
    description: str = ""


class SvgResponse(BaseModel):
    svg: str
    filename: str
