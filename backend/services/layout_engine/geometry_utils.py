"""
Containment tests for furniture footprints.

Decides whether a point lies in a polygon and whether an axis-aligned
footprint rectangle is admissible: inside the room polygon and clear of
every exclusion zone ("hole").

Two strategies share one interface:

* ``SampledContainment``: tests the four corners and the centre of the
  rectangle with ray casting. This is an approximation: a hole or a concave
  room edge that cuts through the rectangle without covering any of the five
  sample points goes undetected. It is the engine default.
* ``ExactContainment``: full polygon test with Shapely. The room must cover
  the rectangle and no hole may share any area with it.
"""

from typing import List, Sequence, Tuple

from shapely.geometry import Polygon, box
from shapely.validation import make_valid

from .models import Polygon as PointSeq


def point_in_polygon(point: Tuple[float, float], polygon: PointSeq) -> bool:
    """
    Horizontal ray-casting parity test.

    An edge counts as crossed when its y-span strictly straddles the point's
    y and its x at that height lies to the right of the point. Points exactly
    on an edge get whichever answer the parity gives; winding order does not
    matter.
    """
    x, y = point[0], point[1]
    inside = False
    n = len(polygon)
    j = n - 1
    for i in range(n):
        xi, yi = polygon[i][0], polygon[i][1]
        xj, yj = polygon[j][0], polygon[j][1]
        if (yi > y) != (yj > y) and x < (xj - xi) * (y - yi) / (yj - yi) + xi:
            inside = not inside
        j = i
    return inside


def rect_sample_points(x: float, y: float, w: float, h: float) -> List[Tuple[float, float]]:
    """Four corners plus centre of the rectangle at ``(x, y)`` sized ``w × h``."""
    return [
        (x, y),
        (x + w, y),
        (x + w, y + h),
        (x, y + h),
        (x + w / 2, y + h / 2),
    ]


def polygon_bounds(polygon: PointSeq) -> Tuple[float, float, float, float]:
    """``(minx, miny, maxx, maxy)`` of a point sequence."""
    xs = [p[0] for p in polygon]
    ys = [p[1] for p in polygon]
    return min(xs), min(ys), max(xs), max(ys)


class SampledContainment:
    """Five-point sampled admissibility (corners + centre)."""

    name = "sampled"

    def admissible(
        self,
        x: float,
        y: float,
        w: float,
        h: float,
        main_polygon: PointSeq,
        holes: Sequence[PointSeq],
    ) -> bool:
        samples = rect_sample_points(x, y, w, h)

        if not all(point_in_polygon(p, main_polygon) for p in samples):
            return False

        for hole in holes:
            if any(point_in_polygon(p, hole) for p in samples):
                return False

        return True


class ExactContainment:
    """
    Exact admissibility via Shapely.

    Shapely polygons are built per call; the room boundary itself is allowed
    (``covers``) and holes that only touch the rectangle's edge are allowed.
    """

    name = "exact"

    def admissible(
        self,
        x: float,
        y: float,
        w: float,
        h: float,
        main_polygon: PointSeq,
        holes: Sequence[PointSeq],
    ) -> bool:
        if len(main_polygon) < 3:
            return False
        rect = box(x, y, x + w, y + h)
        room = Polygon(main_polygon)
        if not room.is_valid:
            room = make_valid(room)
        if not room.covers(rect):
            return False

        for hole in holes:
            if len(hole) < 3:
                continue
            hole_poly = Polygon(hole)
            if not hole_poly.is_valid:
                hole_poly = make_valid(hole_poly)
            if rect.intersection(hole_poly).area > 0:
                return False

        return True


def rect_admissible(
    x: float,
    y: float,
    w: float,
    h: float,
    main_polygon: PointSeq,
    holes: Sequence[PointSeq],
) -> bool:
    """Sampled admissibility check (see ``SampledContainment``)."""
    return SampledContainment().admissible(x, y, w, h, main_polygon, holes)
