"""
Per-pattern layout generation and cost estimate.

Runs the placement engine once for every density pattern and aggregates the
placed items into line items, subtotal and tax. Currency formatting is left
to the document exporter.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence

from config import TAX_RATE
from services.layout_constants import PATTERN_ORDER, aisle_gap_for, pattern_label
from services.layout_engine import FurnitureLayoutGenerator, FurnitureSpec, PlacedItem, Scale

logger = logging.getLogger(__name__)


@dataclass
class LineItem:
    furniture_id: str
    name: str
    unit_price: float
    count: int = 0

    @property
    def subtotal(self) -> float:
        return self.unit_price * self.count

    def to_dict(self) -> dict:
        return {
            "furniture_id": self.furniture_id,
            "name": self.name,
            "unit_price": self.unit_price,
            "count": self.count,
            "subtotal": self.subtotal,
        }


@dataclass
class Estimate:
    line_items: List[LineItem] = field(default_factory=list)
    tax_rate: float = TAX_RATE

    @property
    def item_count(self) -> int:
        return sum(li.count for li in self.line_items)

    @property
    def subtotal(self) -> float:
        return sum(li.subtotal for li in self.line_items)

    @property
    def tax(self) -> int:
        return math.floor(self.subtotal * self.tax_rate)

    @property
    def total(self) -> int:
        return math.floor(self.subtotal * (1 + self.tax_rate))

    @property
    def counts(self) -> Dict[str, int]:
        """Item count keyed by furniture display name."""
        return {li.name: li.count for li in self.line_items}

    def to_dict(self) -> dict:
        return {
            "line_items": [li.to_dict() for li in self.line_items],
            "item_count": self.item_count,
            "subtotal": self.subtotal,
            "tax_rate": self.tax_rate,
            "tax": self.tax,
            "total": self.total,
        }


def summarize(items: Sequence[PlacedItem], tax_rate: Optional[float] = None) -> Estimate:
    """Group placed items by furniture type, in first-seen order."""
    if tax_rate is None:
        tax_rate = TAX_RATE
    if tax_rate < 0:
        raise ValueError(f"Tax rate must be >= 0, got {tax_rate}")

    lines: Dict[str, LineItem] = {}
    for item in items:
        spec = item.furniture
        line = lines.get(spec.id)
        if line is None:
            line = lines[spec.id] = LineItem(spec.id, spec.name, spec.unit_price)
        line.count += 1
    return Estimate(line_items=list(lines.values()), tax_rate=tax_rate)


@dataclass
class PatternResult:
    pattern: str
    label: str
    aisle_gap_mm: float
    items: List[PlacedItem]
    estimate: Estimate

    def to_dict(self) -> dict:
        return {
            "pattern": self.pattern,
            "label": self.label,
            "aisle_gap_mm": self.aisle_gap_mm,
            "items": [i.to_dict() for i in self.items],
            "estimate": self.estimate.to_dict(),
        }


def generate_all_patterns(
    main_polygon,
    holes,
    scale,
    catalog: Sequence[FurnitureSpec],
    tax_rate: Optional[float] = None,
    id_factory: Optional[Callable[[], str]] = None,
    containment=None,
    max_steps: Optional[int] = None,
) -> Dict[str, PatternResult]:
    """
    Generate a layout and estimate for each density pattern.

    The three runs share polygon, holes, scale and catalog and differ only
    in aisle gap. Results are keyed by pattern name in evaluation order.
    """
    gen = FurnitureLayoutGenerator(
        main_polygon,
        holes,
        Scale.coerce(scale),
        catalog,
        id_factory=id_factory,
        containment=containment,
        max_steps=max_steps,
    )

    results: Dict[str, PatternResult] = {}
    for pattern in PATTERN_ORDER:
        gap = aisle_gap_for(pattern)
        items = gen.generate(pattern, gap)
        results[pattern] = PatternResult(
            pattern=pattern,
            label=pattern_label(pattern),
            aisle_gap_mm=gap,
            items=items,
            estimate=summarize(items, tax_rate),
        )

    logger.info(
        "Pattern counts: "
        + ", ".join(f"{p}={len(r.items)}" for p, r in results.items())
    )
    return results
