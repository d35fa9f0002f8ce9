"""
Layout Engine for furniture placement.

Provides polygon containment tests, rectilinear snapping of hand-drawn
outlines, and the greedy row-sweep placer that fills a room polygon with
table sets.
"""

from .generator import FurnitureLayoutGenerator, LayoutTooLargeError, place_furniture
from .geometry_utils import (
    ExactContainment,
    SampledContainment,
    point_in_polygon,
    rect_admissible,
)
from .models import (
    FurnitureSpec,
    LayoutPattern,
    PlacedItem,
    Point,
    active_catalog,
    default_catalog,
)
from .rectilinear import snap_to_rectilinear
from .scale import InvalidScaleError, Scale

__all__ = [
    "FurnitureLayoutGenerator",
    "LayoutTooLargeError",
    "place_furniture",
    "ExactContainment",
    "SampledContainment",
    "point_in_polygon",
    "rect_admissible",
    "FurnitureSpec",
    "LayoutPattern",
    "PlacedItem",
    "Point",
    "active_catalog",
    "default_catalog",
    "snap_to_rectilinear",
    "InvalidScaleError",
    "Scale",
]
