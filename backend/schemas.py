"""Pydantic schemas for API request/response validation."""

from pydantic import BaseModel, Field
from typing import Optional


# ---------- Geometry ----------
class PointIn(BaseModel):
    x: float
    y: float


# ---------- Furniture ----------
class FurnitureIn(BaseModel):
    id: str
    name: str
    table_width: float = Field(gt=0, description="mm")
    table_depth: float = Field(gt=0, description="mm")
    chair_count: int = Field(ge=0)
    unit_price: float = Field(ge=0)
    color: str = "#3b82f6"
    enabled: bool = True


# ---------- Layout Generation ----------
class LayoutRequest(BaseModel):
    polygon: list[PointIn]
    holes: list[list[PointIn]] = []
    scale: float = Field(description="Pixels per millimetre")
    furniture: Optional[list[FurnitureIn]] = None
    tax_rate: Optional[float] = Field(default=None, ge=0)
    containment: str = Field(default="sampled", pattern="^(sampled|exact)$")


class PlacedItemOut(BaseModel):
    id: str
    x: float
    y: float
    rotation: float
    furniture_id: str
    furniture_name: str


class LineItemOut(BaseModel):
    furniture_id: str
    name: str
    unit_price: float
    count: int
    subtotal: float


class EstimateOut(BaseModel):
    line_items: list[LineItemOut]
    item_count: int
    subtotal: float
    tax_rate: float
    tax: int
    total: int


class PatternResultOut(BaseModel):
    pattern: str
    label: str
    aisle_gap_mm: float
    items: list[PlacedItemOut]
    estimate: EstimateOut


class LayoutResponse(BaseModel):
    area_m2: float
    results: dict[str, PatternResultOut]


# ---------- Rectify ----------
class RectifyRequest(BaseModel):
    points: list[PointIn]
    threshold: Optional[float] = Field(default=None, ge=0)


class RectifyResponse(BaseModel):
    points: list[PointIn]


# ---------- Scale Calibration ----------
class CalibrateRequest(BaseModel):
    start: PointIn
    end: PointIn
    length_mm: float


class CalibrateResponse(BaseModel):
    scale: float
    mm_per_px: float


# ---------- Outline Acquisition ----------
class OutlineRequest(BaseModel):
    result: dict
    image_width: float = Field(gt=0)
    image_height: float = Field(gt=0)


class OutlineResponse(BaseModel):
    polygon: list[PointIn]
    scale: Optional[float] = None
