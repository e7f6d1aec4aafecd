"""Assemble a standalone SVG document for a superellipse."""

from __future__ import annotations

import logging
from xml.sax.saxutils import escape

from superellipse.engine.bounds import bounds_of
from superellipse.engine.config import DEFAULT_CONFIG
from superellipse.engine.sampler import superellipse_points
from superellipse.models.shape import RenderStyle, ShapeParameters
from superellipse.svg.path_builder import build_path
from superellipse.utils.math_helpers import format_full

logger = logging.getLogger(__name__)

SVG_NAMESPACE = "http://www.w3.org/2000/svg"


def _attr(value: str) -> str:
    return escape(value, {'"': "&quot;"})


def assemble(params: ShapeParameters, style: RenderStyle | None = None) -> str:
    """Generate SVG markup for the shape.

    The viewBox is the bbox of the sampled points grown by
    padding + stroke_width / 2 on every side so the stroke is never clipped.
    """
    style = style or RenderStyle()
    points = superellipse_points(params.a, params.b, params.n, params.segments)

    box = bounds_of(points, params.a, params.b).inflate(style.padding + style.stroke_width / 2)
    path_d = build_path(points, precision=style.precision, close=True)

    view_box = " ".join(format_full(v) for v in (box.min_x, box.min_y, box.width, box.height))
    size_attrs = ""
    if style.width_px:
        size_attrs += f' width="{format_full(style.width_px)}"'
    if style.height_px:
        size_attrs += f' height="{format_full(style.height_px)}"'

    lines = [
        f'<svg xmlns="{SVG_NAMESPACE}"{size_attrs} viewBox="{view_box}"'
        f' preserveAspectRatio="xMidYMid meet">',
        f'  <path d="{path_d}" fill="{_attr(style.fill)}" stroke="{_attr(style.stroke)}"'
        f' stroke-width="{format_full(style.stroke_width)}" vector-effect="non-scaling-stroke" />',
        "</svg>",
    ]
    logger.debug("Assembled SVG: %d points, viewBox %s", len(points), view_box)
    return "\n".join(lines)


def generate_superellipse_svg(
    a: float,
    b: float,
    n: float,
    segments: int = DEFAULT_CONFIG.document_segments,
    **style: object,
) -> str:
    """Keyword convenience wrapper around `assemble`.

    Style keywords are the RenderStyle fields (stroke, stroke_width, fill,
    width_px, height_px, padding, precision).
    """
    params = ShapeParameters(a=a, b=b, n=n, segments=segments)
    return assemble(params, RenderStyle(**style))


def suggested_filename(params: ShapeParameters) -> str:
    """Download name, e.g. superellipse_a100_b100_n3.svg."""
    return (
        f"superellipse_a{format_full(params.a)}"
        f"_b{format_full(params.b)}_n{format_full(params.n)}.svg"
    )
