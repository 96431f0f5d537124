import math

import pytest

from cassino.gui.config import CardDimensions
from cassino.gui.services.geometry import (
    Rect,
    distance,
    dropped_bounds,
    has_overlap,
    overlap_area,
    overlap_percentage,
    within_bounds,
)

RECT_PAIRS = [
    (Rect(0, 0, 60, 80), Rect(30, 40, 60, 80)),
    (Rect(10, 10, 5, 5), Rect(0, 0, 100, 100)),
    (Rect(0, 0, 10, 10), Rect(20, 20, 10, 10)),
    (Rect(0, 0, 90, 80), Rect(45.5, -12.25, 60, 80)),
]


@pytest.mark.parametrize("a, b", RECT_PAIRS)
def test_overlap_is_symmetric_and_bounded(a, b):
    assert overlap_area(a, b) == overlap_area(b, a)
    assert 0 <= overlap_area(a, b) <= min(a.area, b.area)
    assert 0 <= overlap_percentage(a, b) <= 1


def test_partial_overlap():
    a = Rect(0, 0, 60, 80)
    b = Rect(30, 40, 60, 80)
    assert overlap_area(a, b) == 30 * 40
    assert overlap_percentage(a, b) == pytest.approx(1200 / 4800)


def test_contained_rect_is_full_overlap():
    small = Rect(10, 10, 5, 5)
    big = Rect(0, 0, 100, 100)
    assert overlap_percentage(small, big) == 1.0
    assert overlap_percentage(big, small) == 1.0


def test_disjoint_and_touching_edges_do_not_overlap():
    a = Rect(0, 0, 10, 10)
    assert overlap_area(a, Rect(20, 20, 10, 10)) == 0
    assert overlap_percentage(a, Rect(20, 20, 10, 10)) == 0
    # shared edge only
    assert overlap_area(a, Rect(10, 0, 10, 10)) == 0
    assert not has_overlap(a, Rect(10, 0, 10, 10))
    assert has_overlap(a, Rect(9, 0, 10, 10))


def test_zero_area_rect_yields_zero_percent():
    degenerate = Rect(5, 5, 0, 0)
    assert overlap_percentage(degenerate, Rect(0, 0, 10, 10)) == 0
    assert overlap_percentage(Rect(0, 0, 0, 10), Rect(0, 0, 0, 10)) == 0


def test_negative_dimensions_are_rejected():
    with pytest.raises(ValueError):
        Rect(0, 0, -1, 10)
    with pytest.raises(ValueError):
        Rect(0, 0, 10, -1)


def test_dropped_bounds_centers_card_on_point():
    assert dropped_bounds((90, 100)) == Rect(60, 60, 60, 80)
    assert dropped_bounds((0, 0), CardDimensions(100, 40)) == Rect(-50, -20, 100, 40)


def test_rect_helpers():
    r = Rect(10, 20, 30, 40)
    assert r.bbox == (10, 20, 40, 60)
    assert r.center == (25, 40)
    assert r.contains(10, 20)
    assert r.contains(40, 60)
    assert not r.contains(41, 60)


def test_distance_and_tolerance():
    assert distance((0, 0), (3, 4)) == 5
    assert math.isclose(distance((1, 1), (2, 2)), math.sqrt(2))
    r = Rect(0, 0, 100, 100)
    assert within_bounds((50, 50), r, 10)
    assert within_bounds((-10, 110), r, 10)
    assert not within_bounds((-11, 50), r, 10)
    assert not within_bounds((101, 50), r)
