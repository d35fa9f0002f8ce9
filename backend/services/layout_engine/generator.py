"""
Furniture layout generator: greedy row-major sweep.

Fills the room polygon with table sets row by row, keeping a constant aisle
around the perimeter and between rows. At each cursor position the first
enabled catalog entry whose footprint is admissible wins (first-fit, catalog
order is the caller's priority). The result is deterministic for a given
identifier sequence, not area-optimal.
"""

import logging
from typing import Callable, List, Optional, Sequence, Union

from config import MAX_SWEEP_STEPS
from services.layout_constants import (
    CHAIR_DEPTH_MM,
    EMPTY_ROW_STEP_MM,
    ITEM_GAP_MM,
    SEARCH_STEP_MM,
    aisle_gap_for,
)

from .geometry_utils import SampledContainment, polygon_bounds
from .models import FurnitureSpec, LayoutPattern, PlacedItem, Polygon, generate_uuid
from .scale import Scale

logger = logging.getLogger(__name__)


class LayoutTooLargeError(ValueError):
    """The sweep needed more iterations than the configured ceiling."""

    def __init__(self, max_steps: int):
        super().__init__(
            f"Layout computation exceeded {max_steps} sweep steps; "
            "check the scale or reduce the polygon size."
        )
        self.max_steps = max_steps


class FurnitureLayoutGenerator:
    """
    Place furniture inside a room polygon for one density pattern.

    Typical workflow::

        gen = FurnitureLayoutGenerator(room, holes, Scale(0.1), catalog)
        items = gen.generate("standard")
    """

    def __init__(
        self,
        main_polygon: Polygon,
        holes: Sequence[Polygon],
        scale: Union[Scale, float],
        catalog: Sequence[FurnitureSpec],
        id_factory: Optional[Callable[[], str]] = None,
        containment=None,
        max_steps: Optional[int] = None,
    ):
        """
        Parameters
        ----------
        main_polygon : sequence of (x, y)
            Room outline in pixels.
        holes : list of polygons
            Exclusion zones in pixels.
        scale : Scale or float
            Pixels per millimetre. Rejected with ``InvalidScaleError`` when
            not strictly positive and finite.
        catalog : sequence of FurnitureSpec
            Candidates in priority order; disabled entries are skipped.
        id_factory : callable, optional
            Zero-argument callable producing item identifiers. Defaults to
            random UUID4 strings.
        containment : object, optional
            Strategy exposing ``admissible(x, y, w, h, main, holes)``.
            Defaults to ``SampledContainment``.
        max_steps : int, optional
            Ceiling on sweep iterations; ``0`` disables it. Defaults to
            ``config.MAX_SWEEP_STEPS``.
        """
        self.scale = Scale.coerce(scale)
        self.main_polygon = list(main_polygon)
        self.holes = [list(h) for h in holes]
        self.catalog = tuple(catalog)
        self.id_factory = id_factory or generate_uuid
        self.containment = containment or SampledContainment()
        self.max_steps = MAX_SWEEP_STEPS if max_steps is None else max_steps

    def generate(
        self,
        pattern: Union[LayoutPattern, str] = LayoutPattern.STANDARD,
        aisle_gap_mm: Optional[float] = None,
    ) -> List[PlacedItem]:
        """
        Run the sweep once.

        ``aisle_gap_mm`` overrides the pattern's configured aisle gap.
        """
        if aisle_gap_mm is None:
            aisle_gap_mm = aisle_gap_for(pattern)
        if aisle_gap_mm < 0:
            raise ValueError(f"Aisle gap must be >= 0 mm, got {aisle_gap_mm}")

        if len(self.main_polygon) < 3:
            logger.debug("Main polygon has fewer than 3 points; nothing to place")
            return []

        scale = self.scale
        min_x, min_y, max_x, max_y = polygon_bounds(self.main_polygon)

        gap_px = scale.to_pixels(aisle_gap_mm)
        item_gap_px = scale.to_pixels(ITEM_GAP_MM)
        search_step_px = scale.to_pixels(SEARCH_STEP_MM)
        empty_row_px = scale.to_pixels(EMPTY_ROW_STEP_MM)
        chair_px = scale.to_pixels(CHAIR_DEPTH_MM)

        candidates = [
            (f, scale.to_pixels(f.table_width), scale.to_pixels(f.table_depth) + chair_px)
            for f in self.catalog
            if f.enabled
        ]

        items: List[PlacedItem] = []
        steps = 0
        cursor_y = min_y + gap_px

        while cursor_y < max_y:
            cursor_x = min_x + gap_px
            row_height = 0.0

            while cursor_x < max_x:
                steps = self._tick(steps)
                placed = False

                for furniture, w, total_h in candidates:
                    if self.containment.admissible(
                        cursor_x, cursor_y, w, total_h, self.main_polygon, self.holes
                    ):
                        items.append(
                            PlacedItem(
                                id=self.id_factory(),
                                x=cursor_x,
                                y=cursor_y,
                                furniture=furniture,
                            )
                        )
                        cursor_x += w + item_gap_px
                        row_height = max(row_height, total_h)
                        placed = True
                        break

                if not placed:
                    cursor_x += search_step_px

            steps = self._tick(steps)
            if row_height > 0:
                cursor_y += row_height + gap_px
            else:
                cursor_y += empty_row_px

        pattern_name = getattr(pattern, "value", pattern)
        logger.info(
            f"Placed {len(items)} items for pattern={pattern_name} "
            f"(aisle={aisle_gap_mm:.0f}mm, steps={steps}, "
            f"containment={getattr(self.containment, 'name', type(self.containment).__name__)})"
        )
        return items

    def _tick(self, steps: int) -> int:
        steps += 1
        if self.max_steps and steps > self.max_steps:
            raise LayoutTooLargeError(self.max_steps)
        return steps


def place_furniture(
    main_polygon: Polygon,
    holes: Sequence[Polygon],
    scale: Union[Scale, float],
    pattern: Union[LayoutPattern, str],
    catalog: Sequence[FurnitureSpec],
    aisle_gap_mm: Optional[float] = None,
    id_factory: Optional[Callable[[], str]] = None,
    containment=None,
    max_steps: Optional[int] = None,
) -> List[PlacedItem]:
    """Functional entry point; see ``FurnitureLayoutGenerator``."""
    gen = FurnitureLayoutGenerator(
        main_polygon,
        holes,
        scale,
        catalog,
        id_factory=id_factory,
        containment=containment,
        max_steps=max_steps,
    )
    return gen.generate(pattern, aisle_gap_mm)
