import math

import pytest

from fontcraft.geometry import Rect, Transform2, Vector2


def test_vector_arithmetic_round_trip():
    a = Vector2(3.5, -2.0)
    b = Vector2(1.25, 4.0)
    assert (a + b) - b == a
    assert -(-a) == a
    assert a * 2 == 2 * a
    assert a + (-a) == Vector2()


@pytest.mark.parametrize("x, y", [(1.5, -1.5), (0.0, 2.0), (-0.25, 7.75)])
def test_vector_floor_invariants(x, y):
    floored = Vector2(x, y).floor()
    for value, low in ((x, floored.x), (y, floored.y)):
        assert low == math.floor(low)
        assert low <= value < low + 1


def test_vector_to_int_truncates_integral_values():
    converted = Vector2(5.0, -3.0).to_int()
    assert converted == Vector2(5, -3)
    assert isinstance(converted.x, int)


def test_rect_properties():
    rect = Rect.from_origin_size(Vector2(1.0, -20.0), Vector2(14.0, 21.0))
    assert rect.origin_x == 1.0
    assert rect.origin_y == -20.0
    assert rect.width == 14.0
    assert rect.height == 21.0
    assert rect.lower_right == rect.origin + rect.size


def test_intersection_with_self_is_self():
    rect = Rect(Vector2(2.0, 3.0), Vector2(5.0, 6.0))
    assert rect.intersection(rect) == rect


def test_intersection_is_commutative_and_contained():
    a = Rect(Vector2(0.0, 0.0), Vector2(10.0, 10.0))
    b = Rect(Vector2(5.0, -5.0), Vector2(10.0, 10.0))
    overlap = a.intersection(b)
    assert overlap == b.intersection(a)
    for rect in (a, b):
        assert rect.origin_x <= overlap.origin_x and overlap.max_x <= rect.max_x
        assert rect.origin_y <= overlap.origin_y and overlap.max_y <= rect.max_y


def test_scale_round_trip():
    rect = Rect(Vector2(1.0, 2.0), Vector2(3.0, 4.0))
    assert rect.scale(1.0) == rect
    assert rect.scale(2.0).scale(0.5) == rect


def test_round_out_contains_original():
    rect = Rect(Vector2(0.3, -1.7), Vector2(2.2, 3.1))
    outer = rect.round_out()
    assert outer.origin == outer.origin.floor()
    assert outer.lower_right == outer.lower_right.floor()
    assert outer.origin_x <= rect.origin_x and outer.origin_y <= rect.origin_y
    assert outer.max_x >= rect.max_x and outer.max_y >= rect.max_y


def test_round_out_of_integral_rect_is_unchanged():
    rect = Rect(Vector2(1.0, -20.0), Vector2(14.0, 21.0))
    assert rect.round_out() == rect
    assert rect.to_int() == Rect(Vector2(1, -20), Vector2(14, 21))


def test_identity_and_row_major():
    point = Vector2(7.0, -3.0)
    assert Transform2.identity().apply(point) == point
    assert Transform2.row_major(1.0, 0.0, 0.0, 1.0, 0.0, 0.0) == Transform2.identity()


def test_translation_round_trip():
    offset = Vector2(30.0, 100.0)
    point = Vector2(2.5, -4.0)
    moved = Transform2.from_translation(offset).apply(point)
    assert moved - offset == point
    assert Transform2.from_translation(-offset).apply(moved) == point


def test_apply_rect_under_translation_keeps_size():
    rect = Rect(Vector2(1.0, 2.0), Vector2(3.0, 4.0))
    offset = Vector2(8.0, 8.0)
    moved = Transform2.from_translation(offset).apply_rect(rect)
    assert moved.size == rect.size
    assert moved.origin == rect.origin + offset


def test_apply_rect_under_scale_matches_rect_scale():
    rect = Rect(Vector2(-1.0, 2.0), Vector2(3.0, 5.0))
    assert Transform2.from_scale(3.0).apply_rect(rect) == rect.scale(3.0)


def test_apply_rect_under_flip_keeps_extent():
    rect = Rect(Vector2(1.0, 2.0), Vector2(3.0, 4.0))
    flipped = Transform2.from_scale(Vector2(1.0, -1.0)).apply_rect(rect)
    assert flipped.size == rect.size
    assert flipped.origin_y == -rect.max_y


def test_composition_matches_sequential_application():
    first = Transform2.row_major(3.0, 0.0, 0.0, 3.0, 8.0, 8.0)
    second = Transform2.row_major(1.0, 2.0, -1.0, 0.5, -4.0, 6.0)
    point = Vector2(5.0, -2.0)
    composed = (first @ second).apply(point)
    expected = first.apply(second.apply(point))
    assert composed.x == pytest.approx(expected.x)
    assert composed.y == pytest.approx(expected.y)


def test_composition_with_identity():
    transform = Transform2.row_major(1.0, 2.0, 3.0, 4.0, 5.0, 6.0)
    assert Transform2.identity() @ transform == transform
    assert transform @ Transform2.identity() == transform