"""
Value types shared by the placement engine.

Points are plain ``(x, y)`` tuples in pixel space; polygons are sequences of
such points, implicitly closed.
"""

import enum
import uuid
from dataclasses import dataclass, field, replace
from typing import List, NamedTuple, Sequence, Tuple

from services.layout_constants import FURNITURE_TYPES


class Point(NamedTuple):
    x: float
    y: float


Polygon = Sequence[Tuple[float, float]]


def generate_uuid() -> str:
    return str(uuid.uuid4())


def as_points(raw) -> List[Point]:
    """Coerce ``[(x, y), ...]``, ``[[x, y], ...]`` or ``[{"x":..,"y":..}]``."""
    points = []
    for p in raw:
        if isinstance(p, dict):
            points.append(Point(float(p["x"]), float(p["y"])))
        else:
            points.append(Point(float(p[0]), float(p[1])))
    return points


class LayoutPattern(str, enum.Enum):
    CRAMPED = "cramped"
    STANDARD = "standard"
    SPACIOUS = "spacious"


@dataclass(frozen=True)
class FurnitureSpec:
    """A catalog entry: one table plus its chairs."""

    id: str
    name: str
    table_width: float      # mm
    table_depth: float      # mm
    chair_count: int
    unit_price: float
    color: str = "#3b82f6"
    enabled: bool = True

    def with_price(self, price: float) -> "FurnitureSpec":
        return replace(self, unit_price=price)

    def with_enabled(self, enabled: bool) -> "FurnitureSpec":
        return replace(self, enabled=enabled)


@dataclass(frozen=True)
class PlacedItem:
    """One furniture instance placed by the engine (top-left in pixels)."""

    id: str
    x: float
    y: float
    furniture: FurnitureSpec
    rotation: float = field(default=0.0)

    def to_dict(self) -> dict:
        """Serialize placed item to a dictionary."""
        return {
            "id": self.id,
            "x": self.x,
            "y": self.y,
            "rotation": self.rotation,
            "furniture_id": self.furniture.id,
            "furniture_name": self.furniture.name,
        }

    def __repr__(self) -> str:
        return (
            f"PlacedItem(id={self.id!r}, type={self.furniture.id}, "
            f"pos=({self.x:.1f},{self.y:.1f}))"
        )


# ---------------------------------------------------------------------------
# Catalog snapshots
# ---------------------------------------------------------------------------

def default_catalog() -> Tuple[FurnitureSpec, ...]:
    """Fresh snapshot of the built-in catalog."""
    return tuple(FurnitureSpec(**entry) for entry in FURNITURE_TYPES)


def active_catalog(catalog: Sequence[FurnitureSpec]) -> Tuple[FurnitureSpec, ...]:
    """Enabled entries, catalog order preserved."""
    return tuple(f for f in catalog if f.enabled)


def with_price(catalog: Sequence[FurnitureSpec], furniture_id: str,
               price: float) -> Tuple[FurnitureSpec, ...]:
    """Return a new catalog with one entry's unit price replaced."""
    return tuple(
        f.with_price(price) if f.id == furniture_id else f for f in catalog
    )


def toggle(catalog: Sequence[FurnitureSpec],
           furniture_id: str) -> Tuple[FurnitureSpec, ...]:
    """Return a new catalog with one entry's enabled flag flipped."""
    return tuple(
        f.with_enabled(not f.enabled) if f.id == furniture_id else f
        for f in catalog
    )
