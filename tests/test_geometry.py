import math

import pytest

from imge.geometry import Rect, Vec2


def test_vec2_defaults_to_origin():
    assert Vec2() == Vec2(0.0, 0.0)


def test_add_then_subtract_round_trip():
    a = Vec2(1.5, -2.0)
    b = Vec2(3.25, 7.0)
    assert (a + b) - b == a


def test_scalar_multiply_matches_repeated_addition():
    a = Vec2(1.5, -2.0)
    assert a * 2 == a + a
    assert 2 * a == a * 2


def test_divide_undoes_multiply():
    a = Vec2(3.0, -6.0)
    assert (a * 4) / 4 == a


def test_divide_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Vec2(1.0, 1.0) / 0


def test_length_of_three_four_vector():
    assert Vec2(3.0, 4.0).length() == pytest.approx(5.0)


def test_length_squared_matches_dot_with_self():
    a = Vec2(2.5, -1.5)
    assert a.length_squared() == pytest.approx(a.dot(a))
    assert a.length_squared() == pytest.approx(a.length() ** 2)


def test_normalized_has_unit_length_and_same_direction():
    a = Vec2(-3.0, 7.0)
    n = a.normalized()
    assert n.length() == pytest.approx(1.0)
    assert a.cross(n) == pytest.approx(0.0, abs=1e-12)
    assert a.dot(n) > 0


def test_normalized_zero_vector_is_zero():
    assert Vec2(0.0, 0.0).normalized() == Vec2(0.0, 0.0)


def test_cross_is_antisymmetric():
    a = Vec2(1.0, 2.0)
    b = Vec2(-4.0, 0.5)
    assert a.cross(b) == pytest.approx(-b.cross(a))
    assert a.cross(a) == 0


def test_distance_is_symmetric_and_matches_difference():
    a = Vec2(1.0, 2.0)
    b = Vec2(-4.0, 0.5)
    assert a.distance_to(b) == pytest.approx(b.distance_to(a))
    assert a.distance_to(b) == pytest.approx((a - b).length())
    assert a.distance_squared_to(b) == pytest.approx(a.distance_to(b) ** 2)


def test_vec2_unpacks():
    x, y = Vec2(1.0, 2.0)
    assert (x, y) == (1.0, 2.0)


def test_vec2_is_immutable():
    v = Vec2(1.0, 2.0)
    with pytest.raises(AttributeError):
        v.x = 5.0  # type: ignore[misc]
    assert v == Vec2(1.0, 2.0)
    assert v.x == 1.0


def test_rect_defaults():
    assert Rect() == Rect(0.0, 0.0, 0.0, 0.0)


def test_rect_edges_are_consistent():
    r = Rect(10.0, 20.0, 30.0, 40.0)
    assert r.left() == r.x
    assert r.top() == r.y
    assert r.right() - r.left() == r.width
    assert r.bottom() - r.top() == r.height


def test_rect_center_and_size():
    r = Rect(10.0, 20.0, 30.0, 40.0)
    c = r.center()
    assert r.left() < c.x < r.right()
    assert c.x - r.left() == pytest.approx(r.right() - c.x)
    assert c.y - r.top() == pytest.approx(r.bottom() - c.y)
    assert r.size() == Vec2(30.0, 40.0)


def test_contains_point_is_half_open():
    r = Rect(10.0, 20.0, 30.0, 40.0)
    assert r.contains_point(r.left(), r.top())
    assert not r.contains_point(r.right(), r.top())
    assert not r.contains_point(r.left(), r.bottom())
    assert r.center() in r
    assert Vec2(r.x - 1, r.y) not in r


def test_contains_rect():
    outer = Rect(0.0, 0.0, 100.0, 100.0)
    inner = Rect(10.0, 10.0, 20.0, 20.0)
    assert outer.contains_rect(outer)
    assert outer.contains_rect(inner)
    assert not inner.contains_rect(outer)


def test_intersects_is_symmetric():
    a = Rect(0.0, 0.0, 10.0, 10.0)
    b = Rect(5.0, 5.0, 10.0, 10.0)
    assert a.intersects(b)
    assert b.intersects(a)


def test_touching_edges_do_not_intersect():
    a = Rect(0.0, 0.0, 10.0, 10.0)
    b = Rect(10.0, 0.0, 10.0, 10.0)
    assert not a.intersects(b)
    assert a.intersection(b) is None


def test_intersection_is_symmetric_and_contained_in_both():
    a = Rect(0.0, 0.0, 10.0, 10.0)
    b = Rect(5.0, -3.0, 10.0, 10.0)
    overlap = a.intersection(b)
    assert overlap == b.intersection(a)
    assert a.contains_rect(overlap)
    assert b.contains_rect(overlap)
    assert overlap.width > 0 and overlap.height > 0


def test_intersection_with_self_is_self():
    a = Rect(3.0, 4.0, 5.0, 6.0)
    assert a.intersection(a) == a


def test_intersection_agrees_with_intersects():
    rects = [
        Rect(0.0, 0.0, 10.0, 10.0),
        Rect(20.0, 20.0, 5.0, 5.0),
        Rect(8.0, 8.0, 20.0, 20.0),
    ]
    for a in rects:
        for b in rects:
            assert (a.intersection(b) is not None) == a.intersects(b)


def test_rect_is_mutable():
    r = Rect()
    r.x = 5.0
    assert r.right() == 5.0
    assert not math.isnan(r.center().x)