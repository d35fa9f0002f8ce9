"""
Rectilinear snapping of hand-drawn room outlines.

Near-equal x (and y) coordinates are pulled onto shared axis lines so a
free-hand polygon becomes orthogonal where the user meant it to be.
"""

import logging
from typing import Dict, List, Sequence

from .models import Point

logger = logging.getLogger(__name__)

DEFAULT_SNAP_THRESHOLD = 20.0  # pixels


def _chain_groups(values: Sequence[float], threshold: float) -> List[List[float]]:
    """
    Split sorted values into chains.

    A value joins the current chain when it is within ``threshold`` of the
    chain's last member, so a chain can span more than ``threshold``.
    """
    ordered = sorted(values)
    if not ordered:
        return []

    groups = [[ordered[0]]]
    for val in ordered[1:]:
        if abs(val - groups[-1][-1]) <= threshold:
            groups[-1].append(val)
        else:
            groups.append([val])
    return groups


def snap_values(values: Sequence[float], threshold: float) -> List[float]:
    """Replace each value by the mean of the chain it belongs to."""
    mapping: Dict[float, float] = {}
    for group in _chain_groups(values, threshold):
        # Already-aligned chains keep their exact value
        mean = group[0] if group[0] == group[-1] else sum(group) / len(group)
        for v in group:
            mapping[v] = mean
    return [mapping[v] for v in values]


def snap_to_rectilinear(
    points: Sequence, threshold: float = DEFAULT_SNAP_THRESHOLD
) -> list:
    """
    Snap polygon vertices onto shared axis lines.

    Parameters
    ----------
    points : sequence of (x, y)
        Polygon vertices in pixel space.
    threshold : float
        Maximum gap (pixels) between consecutive sorted coordinates that
        still chains them together.

    Returns
    -------
    list[Point]
        Same length and order as ``points``. Inputs with fewer than three
        points are returned unchanged.
    """
    if len(points) < 3:
        return points
    if threshold < 0:
        raise ValueError(f"Snap threshold must be >= 0, got {threshold}")

    xs = [float(p[0]) for p in points]
    ys = [float(p[1]) for p in points]

    new_xs = snap_values(xs, threshold)
    new_ys = snap_values(ys, threshold)

    snapped = [Point(x, y) for x, y in zip(new_xs, new_ys)]
    logger.debug(f"Rectilinear snap: {len(points)} vertices, threshold={threshold}")
    return snapped
