"""Containment tests: ray casting, sampled and exact footprint admissibility."""
import sys, os
sys.path.insert(0, os.path.dirname(__file__) or '.')

import pytest

from services.layout_engine.geometry_utils import (
    ExactContainment,
    SampledContainment,
    point_in_polygon,
    polygon_bounds,
    rect_admissible,
    rect_sample_points,
)

SQUARE = [(0, 0), (1000, 0), (1000, 1000), (0, 1000)]
# L-shape: 1000 x 1000 with the top-right 500 x 500 quadrant removed
L_SHAPE = [(0, 0), (500, 0), (500, 500), (1000, 500), (1000, 1000), (0, 1000)]


@pytest.mark.parametrize("point, expected", [
    ((500, 500), True),
    ((1, 999), True),
    ((-1, 500), False),
    ((500, 1001), False),
    ((2000, 2000), False),
])
def test_point_in_square(point, expected):
    assert point_in_polygon(point, SQUARE) is expected


def test_winding_order_does_not_matter():
    reversed_square = list(reversed(SQUARE))
    for p in [(500, 500), (10, 10), (-5, 5), (1005, 500)]:
        assert point_in_polygon(p, SQUARE) == point_in_polygon(p, reversed_square)


def test_concave_polygon():
    assert point_in_polygon((250, 250), L_SHAPE)
    assert point_in_polygon((750, 750), L_SHAPE)
    assert not point_in_polygon((750, 250), L_SHAPE)


def test_triangle():
    tri = [(0, 0), (100, 0), (0, 100)]
    assert point_in_polygon((10, 10), tri)
    assert not point_in_polygon((60, 60), tri)


def test_rect_sample_points_are_corners_and_centre():
    pts = rect_sample_points(10, 20, 100, 50)
    assert pts == [(10, 20), (110, 20), (110, 70), (10, 70), (60, 45)]


def test_polygon_bounds():
    assert polygon_bounds(L_SHAPE) == (0, 0, 1000, 1000)


def test_rect_inside_room_without_holes():
    assert rect_admissible(100, 100, 200, 200, SQUARE, [])


def test_rect_crossing_room_edge_rejected():
    assert not rect_admissible(900, 100, 200, 200, SQUARE, [])


def test_rect_in_removed_quadrant_rejected():
    assert not rect_admissible(600, 100, 200, 200, L_SHAPE, [])


def test_hole_covering_corner_rejects():
    hole = [(250, 250), (400, 250), (400, 400), (250, 400)]
    assert not rect_admissible(100, 100, 200, 200, SQUARE, [hole])


def test_hole_covering_only_centre_rejects():
    hole = [(190, 190), (210, 190), (210, 210), (190, 210)]
    assert not rect_admissible(100, 100, 200, 200, SQUARE, [hole])


def test_sampled_misses_thin_hole_exact_catches_it():
    # Thin strip crossing the top edge between the sample points
    hole = [(490, 100), (510, 100), (510, 120), (490, 120)]
    args = (100, 100, 800, 100, SQUARE, [hole])
    assert SampledContainment().admissible(*args)
    assert not ExactContainment().admissible(*args)


def test_exact_allows_hole_touching_edge():
    hole = [(300, 0), (400, 0), (400, 100), (300, 100)]
    assert ExactContainment().admissible(100, 100, 200, 200, SQUARE, [hole])


def test_exact_rejects_concave_notch_cut():
    # Rectangle spans a slot cut into the room; all sample points are inside
    room = [(0, 0), (1000, 0), (1000, 1000), (550, 1000), (550, 400),
            (450, 400), (450, 1000), (0, 1000)]
    args = (100, 300, 600, 400, room, [])
    assert ExactContainment().admissible(*args) is False
    assert SampledContainment().admissible(*args) is True
