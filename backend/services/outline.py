"""
Room outline helpers.

Converts the outline acquisition result (corners on a 0–1000 grid with a
top-left origin, optionally a reference segment with its real length) into
pixel-space polygons and a calibrated scale, and measures polygon area.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

import numpy as np

from services.layout_constants import NORMALIZED_GRID_SIZE
from services.layout_engine import Point, Scale
from services.layout_engine.models import as_points

logger = logging.getLogger(__name__)


class OutlineFormatError(ValueError):
    pass


@dataclass
class ScaleReference:
    start: Point
    end: Point
    length_m: float


@dataclass
class OutlineResult:
    corners: List[Point]
    scale_reference: Optional[ScaleReference] = None


def _check_on_grid(p: Point, what: str):
    if not (0 <= p.x <= NORMALIZED_GRID_SIZE and 0 <= p.y <= NORMALIZED_GRID_SIZE):
        raise OutlineFormatError(
            f"{what} ({p.x}, {p.y}) is outside the 0-{NORMALIZED_GRID_SIZE:.0f} grid."
        )


def parse_outline_result(payload: dict) -> OutlineResult:
    """
    Validate an outline acquisition payload.

    Expected shape::

        {"corners": [{"x": 10, "y": 10}, ...],
         "scaleReference": {"start": {...}, "end": {...}, "lengthInMeters": 5.0}}
    """
    if not isinstance(payload, dict) or "corners" not in payload:
        raise OutlineFormatError("Outline result must be an object with 'corners'.")

    try:
        corners = as_points(payload["corners"])
    except (KeyError, TypeError, ValueError, IndexError) as e:
        raise OutlineFormatError(f"Invalid corner list: {e}") from e

    for c in corners:
        _check_on_grid(c, "Corner")

    reference = None
    raw_ref = payload.get("scaleReference")
    if raw_ref:
        try:
            start, end = as_points([raw_ref["start"], raw_ref["end"]])
            length_m = float(raw_ref["lengthInMeters"])
        except (KeyError, TypeError, ValueError, IndexError) as e:
            raise OutlineFormatError(f"Invalid scale reference: {e}") from e
        _check_on_grid(start, "Scale reference start")
        _check_on_grid(end, "Scale reference end")
        reference = ScaleReference(start=start, end=end, length_m=length_m)

    return OutlineResult(corners=corners, scale_reference=reference)


def normalized_to_pixels(
    points: Sequence, image_width: float, image_height: float
) -> List[Point]:
    """Map 0–1000 grid coordinates onto an image of the given pixel size."""
    if image_width <= 0 or image_height <= 0:
        raise ValueError("Image dimensions must be positive.")
    return [
        Point(
            p[0] / NORMALIZED_GRID_SIZE * image_width,
            p[1] / NORMALIZED_GRID_SIZE * image_height,
        )
        for p in points
    ]


def outline_to_pixels(result: OutlineResult, image_width: float, image_height: float):
    """
    Pixel polygon plus a calibrated scale when a reference is present.

    Returns ``(polygon, scale_or_none)``.
    """
    polygon = normalized_to_pixels(result.corners, image_width, image_height)
    scale = None
    ref = result.scale_reference
    if ref is not None:
        start, end = normalized_to_pixels([ref.start, ref.end], image_width, image_height)
        scale = Scale.from_segment(start, end, ref.length_m * 1000.0)
        logger.info(f"Scale from outline reference: {scale.px_per_mm:.5f} px/mm")
    return polygon, scale


def polygon_area_m2(polygon: Sequence, scale) -> float:
    """Shoelace area of a pixel polygon, in square metres."""
    if len(polygon) < 3:
        return 0.0
    scale = Scale.coerce(scale)
    pts = np.asarray([(p[0], p[1]) for p in polygon], dtype=float)
    x, y = pts[:, 0], pts[:, 1]
    area_px = 0.5 * abs(np.dot(x, np.roll(y, -1)) - np.dot(y, np.roll(x, -1)))
    area_mm2 = scale.to_millimeters(scale.to_millimeters(area_px))
    return float(area_mm2 / 1_000_000)
