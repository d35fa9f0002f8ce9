"""Outline acquisition parsing, grid rescaling, scale calibration and area."""
import sys, os
sys.path.insert(0, os.path.dirname(__file__) or '.')

import math

import pytest

from services.layout_engine import InvalidScaleError, Scale
from services.outline import (
    OutlineFormatError,
    normalized_to_pixels,
    outline_to_pixels,
    parse_outline_result,
    polygon_area_m2,
)

PAYLOAD = {
    "corners": [
        {"x": 10, "y": 10}, {"x": 990, "y": 10},
        {"x": 990, "y": 990}, {"x": 10, "y": 990},
    ],
    "scaleReference": {
        "start": {"x": 0, "y": 500},
        "end": {"x": 1000, "y": 500},
        "lengthInMeters": 10,
    },
}


def test_normalized_grid_maps_to_image_pixels():
    pts = normalized_to_pixels([(500, 250), (1000, 1000)], 2000, 1000)
    assert pts == [(1000, 250), (2000, 1000)]


def test_normalized_requires_positive_image():
    with pytest.raises(ValueError):
        normalized_to_pixels([(0, 0)], 0, 100)


def test_parse_and_convert_with_reference():
    result = parse_outline_result(PAYLOAD)
    assert len(result.corners) == 4
    assert result.scale_reference.length_m == 10

    polygon, scale = outline_to_pixels(result, 2000, 1000)
    assert polygon[0] == pytest.approx((20, 10))
    # 2000 px across 10 m
    assert scale.px_per_mm == pytest.approx(0.2)


def test_parse_without_reference():
    result = parse_outline_result({"corners": PAYLOAD["corners"]})
    polygon, scale = outline_to_pixels(result, 1000, 1000)
    assert scale is None
    assert len(polygon) == 4


@pytest.mark.parametrize("payload", [
    None,
    {},
    {"corners": [{"x": 1}]},
    {"corners": [{"x": "a", "y": 2}]},
    {"corners": [{"x": 1200, "y": 0}]},
    {"corners": [{"x": 1, "y": 1}], "scaleReference": {"start": {"x": 0, "y": 0}}},
    {"corners": [{"x": 1, "y": 1}], "scaleReference": {
        "start": {"x": -5, "y": 0}, "end": {"x": 100, "y": 0}, "lengthInMeters": 5}},
    {"corners": [{"x": 1, "y": 1}], "scaleReference": {
        "start": {"x": 0, "y": 0}, "end": {"x": 100, "y": 1500}, "lengthInMeters": 5}},
])
def test_malformed_payload_rejected(payload):
    with pytest.raises(OutlineFormatError):
        parse_outline_result(payload)


def test_scale_from_segment():
    scale = Scale.from_segment((0, 0), (300, 400), 5000)
    assert scale.px_per_mm == pytest.approx(0.1)
    assert scale.mm_per_px == pytest.approx(10)
    assert scale.to_pixels(1300) == pytest.approx(130)
    assert scale.to_millimeters(130) == pytest.approx(1300)


@pytest.mark.parametrize("start, end, length", [
    ((0, 0), (0, 0), 1000),
    ((0, 0), (100, 0), 0),
    ((0, 0), (100, 0), -5),
    ((0, 0), (100, 0), math.nan),
])
def test_bad_calibration_rejected(start, end, length):
    with pytest.raises(InvalidScaleError):
        Scale.from_segment(start, end, length)


def test_area_in_square_metres():
    square = [(0, 0), (1000, 0), (1000, 1000), (0, 1000)]
    # 1000 px at 0.1 px/mm is 10 m
    assert polygon_area_m2(square, 0.1) == pytest.approx(100)
    assert polygon_area_m2(list(reversed(square)), Scale(0.1)) == pytest.approx(100)


def test_area_of_degenerate_polygon_is_zero():
    assert polygon_area_m2([(0, 0), (10, 10)], 0.1) == 0.0
