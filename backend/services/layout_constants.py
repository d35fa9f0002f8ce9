"""
Centralized Layout Constants - Single source of truth for the placement engine.

Exposes:
  - The default furniture catalog (table sets with chairs)
  - Chair dimensions
  - Density patterns and their aisle gaps
  - Fixed sweep increments used by the row-sweep placer

All dimensions are millimetres. Prices are in the catalog's currency unit
(no formatting is done here). Engines import from this module instead of
defining their own numbers.
"""

from typing import Dict, List

# ===========================================================================
# FURNITURE
# ===========================================================================

CHAIR_DIMENSIONS = {"width": 500.0, "depth": 600.0}
CHAIR_DEPTH_MM = CHAIR_DIMENSIONS["depth"]

FURNITURE_TYPES: List[Dict] = [
    {
        "id": "type1",
        "name": "Type 1 (1800x450)",
        "table_width": 1800.0,
        "table_depth": 450.0,
        "chair_count": 3,
        "unit_price": 50000,
        "color": "#3b82f6",  # blue
    },
    {
        "id": "type2",
        "name": "Type 2 (1500x450)",
        "table_width": 1500.0,
        "table_depth": 450.0,
        "chair_count": 2,
        "unit_price": 45000,
        "color": "#10b981",  # emerald
    },
    {
        "id": "type3",
        "name": "Type 3 (1200x450)",
        "table_width": 1200.0,
        "table_depth": 450.0,
        "chair_count": 2,
        "unit_price": 40000,
        "color": "#f59e0b",  # amber
    },
]

# ===========================================================================
# DENSITY PATTERNS
# ===========================================================================

PATTERN_CONFIG: Dict[str, Dict] = {
    "cramped": {"aisle_gap": 1000.0, "label": "Tight"},
    "standard": {"aisle_gap": 1300.0, "label": "Standard"},
    "spacious": {"aisle_gap": 1600.0, "label": "Generous"},
}

# Evaluation order when every pattern is generated at once
PATTERN_ORDER = ("cramped", "standard", "spacious")

# ===========================================================================
# SWEEP INCREMENTS
# ===========================================================================

ITEM_GAP_MM = 50.0         # side-by-side gap between placed tables
SEARCH_STEP_MM = 50.0      # x advance when nothing fits at the cursor
EMPTY_ROW_STEP_MM = 100.0  # y advance when a whole row stays empty

# Outline acquisition grid (0..1000, top-left origin)
NORMALIZED_GRID_SIZE = 1000.0


def _pattern_key(pattern) -> str:
    key = getattr(pattern, "value", pattern)
    if key not in PATTERN_CONFIG:
        raise ValueError(
            f"Unknown layout pattern {pattern!r}; expected one of {list(PATTERN_CONFIG)}"
        )
    return key


def aisle_gap_for(pattern) -> float:
    """Aisle gap (mm) for a pattern name or ``LayoutPattern``."""
    return PATTERN_CONFIG[_pattern_key(pattern)]["aisle_gap"]


def pattern_label(pattern) -> str:
    """Display label for a pattern."""
    return PATTERN_CONFIG[_pattern_key(pattern)]["label"]
