"""
Furniture layout routes.

Generates layouts for every density pattern, snaps hand-drawn outlines,
calibrates the plan scale and converts outline acquisition results into
pixel space. All work is synchronous and stateless.
"""

import logging
from fastapi import APIRouter, HTTPException

from config import RECTIFY_THRESHOLD_PX
from schemas import (
    LayoutRequest, LayoutResponse,
    RectifyRequest, RectifyResponse,
    CalibrateRequest, CalibrateResponse,
    OutlineRequest, OutlineResponse,
)
from services.estimate import generate_all_patterns
from services.layout_engine import (
    ExactContainment, FurnitureSpec, InvalidScaleError, LayoutTooLargeError,
    SampledContainment, Scale, default_catalog, snap_to_rectilinear,
)
from services.outline import (
    OutlineFormatError, outline_to_pixels, parse_outline_result, polygon_area_m2,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/layout", tags=["layout"])

_CONTAINMENT = {
    "sampled": SampledContainment,
    "exact": ExactContainment,
}


def _to_tuples(points) -> list:
    return [(p.x, p.y) for p in points]


@router.post("/generate", response_model=LayoutResponse)
def generate_layout(req: LayoutRequest):
    """
    Fill the room with furniture for the tight, standard and generous
    patterns and price each result.

    Declared sync so the CPU-bound sweeps run in the threadpool.
    """
    if req.furniture is None:
        catalog = default_catalog()
    else:
        catalog = tuple(FurnitureSpec(**f.model_dump()) for f in req.furniture)

    polygon = _to_tuples(req.polygon)
    holes = [_to_tuples(h) for h in req.holes]

    try:
        scale = Scale(req.scale)
        results = generate_all_patterns(
            polygon,
            holes,
            scale,
            catalog,
            tax_rate=req.tax_rate,
            containment=_CONTAINMENT[req.containment](),
        )
    except InvalidScaleError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except LayoutTooLargeError as e:
        logger.warning(f"Layout aborted: {e}")
        raise HTTPException(status_code=413, detail=str(e))

    return {
        "area_m2": polygon_area_m2(polygon, scale),
        "results": {p: r.to_dict() for p, r in results.items()},
    }


@router.post("/rectify", response_model=RectifyResponse)
async def rectify_outline(req: RectifyRequest):
    """Snap near-aligned vertices onto shared axis lines."""
    threshold = RECTIFY_THRESHOLD_PX if req.threshold is None else req.threshold
    snapped = snap_to_rectilinear(_to_tuples(req.points), threshold)
    return {"points": [{"x": p[0], "y": p[1]} for p in snapped]}


@router.post("/calibrate", response_model=CalibrateResponse)
async def calibrate_scale(req: CalibrateRequest):
    """Derive px/mm from a reference segment of known length."""
    try:
        scale = Scale.from_segment(
            (req.start.x, req.start.y), (req.end.x, req.end.y), req.length_mm
        )
    except InvalidScaleError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return {"scale": scale.px_per_mm, "mm_per_px": scale.mm_per_px}


@router.post("/outline", response_model=OutlineResponse)
async def outline_from_result(req: OutlineRequest):
    """Convert a 0–1000 grid outline result into pixel space."""
    try:
        result = parse_outline_result(req.result)
        polygon, scale = outline_to_pixels(result, req.image_width, req.image_height)
    except (OutlineFormatError, InvalidScaleError) as e:
        raise HTTPException(status_code=422, detail=str(e))
    return {
        "polygon": [{"x": p.x, "y": p.y} for p in polygon],
        "scale": scale.px_per_mm if scale else None,
    }
