"""POST /api/superellipse/* — engine operations over HTTP."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from superellipse.config import Settings
from superellipse.dependencies import get_settings
from superellipse.engine.area import estimate_area
from superellipse.engine.bounds import compute_bounds
from superellipse.engine.classify import describe_shape
from superellipse.engine.errors import InvalidParameter
from superellipse.engine.sampler import superellipse_points
from superellipse.models.requests import PathRequest, SampleRequest, ShapeRequest, SvgRequest
from superellipse.models.responses import MetricsResponse, PathResponse, PointsResponse, SvgResponse
from superellipse.models.shape import ShapeParameters
from superellipse.svg.path_builder import build_path
from superellipse.svg.serializer import assemble, suggested_filename

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/superellipse")


def _capped(segments: int, settings: Settings) -> int:
    return min(segments, settings.max_segments)


def _rejected(e: InvalidParameter) -> HTTPException:
    logger.info("Rejected shape parameters: %s", e)
    return HTTPException(status_code=422, detail=str(e))


@router.post("/points", response_model=PointsResponse)
async def points(req: SampleRequest, settings: Settings = Depends(get_settings)) -> PointsResponse:
    try:
        pts = superellipse_points(req.a, req.b, req.n, _capped(req.segments, settings))
    except InvalidParameter as e:
        raise _rejected(e) from e
    return PointsResponse(points=[(float(x), float(y)) for x, y in pts], count=len(pts))


@router.post("/path", response_model=PathResponse)
async def path(req: PathRequest, settings: Settings = Depends(get_settings)) -> PathResponse:
    try:
        pts = superellipse_points(req.a, req.b, req.n, _capped(req.segments, settings))
    except InvalidParameter as e:
        raise _rejected(e) from e
    return PathResponse(d=build_path(pts, precision=req.precision, close=req.close))


@router.post("/metrics", response_model=MetricsResponse)
async def metrics(req: ShapeRequest) -> MetricsResponse:
    try:
        bounds = compute_bounds(req.a, req.b, req.n)
        area = estimate_area(req.a, req.b, req.n)
    except InvalidParameter as e:
        raise _rejected(e) from e
    return MetricsResponse(bounds=bounds, area=area, description=describe_shape(req.n))


@router.post("/svg", response_model=SvgResponse)
async def svg(req: SvgRequest, settings: Settings = Depends(get_settings)) -> SvgResponse:
    params = ShapeParameters(a=req.a, b=req.b, n=req.n, segments=_capped(req.segments, settings))
    try:
        document = assemble(params, req.style)
    except InvalidParameter as e:
        raise _rejected(e) from e
    return SvgResponse(svg=document, filename=suggested_filename(params))
