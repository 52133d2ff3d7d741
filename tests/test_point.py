import random

import pytest

from pbrtlite.point import Point
from pbrtlite.vector import Vector


def _approx(values):
    return pytest.approx(tuple(values), rel=1e-5, abs=1e-5)


def test_default_constructor():
    assert tuple(Point()) == (0.0, 0.0, 0.0)


def test_parameter_constructor():
    p = Point(1.1, -2.2, 3.3)
    assert (p.x, p.y, p.z) == pytest.approx((1.1, -2.2, 3.3))


def test_add_vector():
    p = Point(1, 2, 3)
    v = Vector(4, 5, 6)
    total = p + v
    assert isinstance(total, Point)
    assert tuple(total) == (5.0, 7.0, 9.0)
    back = total - v
    assert isinstance(back, Point)
    assert tuple(back) == tuple(p)


def test_subtract_vector():
    p = Point(7, 8, 9)
    v = Vector(1, 2, 3)
    diff = p - v
    assert tuple(diff) == (6.0, 6.0, 6.0)
    diff -= v
    assert tuple(diff) == (5.0, 4.0, 3.0)


def test_compound_add():
    p = Point(0, 0, 0)
    p += Vector(2, 4, 6)
    assert tuple(p) == (2.0, 4.0, 6.0)


def test_point_minus_point():
    p1 = Point(1, 3, 5)
    p2 = Point(4, 2, 0)
    v = p2 - p1
    assert isinstance(v, Vector)
    assert tuple(v) == (3.0, -1.0, -5.0)
    assert tuple(p1 + v) == tuple(p2)


def test_index_operator():
    p = Point(9.9, 8.8, 7.7)
    assert p[0] == pytest.approx(9.9)
    assert p[1] == pytest.approx(8.8)
    assert p[2] == pytest.approx(7.7)


@pytest.mark.parametrize("index", [3, 42, 99, -1])
def test_index_out_of_range(index):
    with pytest.raises(IndexError):
        Point(1.0, 2.0, 3.0)[index]


def test_point_plus_point_is_rejected():
    with pytest.raises(TypeError):
        Point(1, 2, 3) + Point(1, 1, 1)


def test_random_add_subtract():
    rng = random.Random(123)
    for _ in range(100):
        p = Point(*(rng.uniform(-100, 100) for _ in range(3)))
        v = Vector(*(rng.uniform(-100, 100) for _ in range(3)))
        result = (p + v) - v
        assert tuple(result) == _approx(p)


def test_subtract_symmetry():
    rng = random.Random(456)
    for _ in range(100):
        p1 = Point(*(rng.uniform(-50, 50) for _ in range(3)))
        p2 = Point(*(rng.uniform(-50, 50) for _ in range(3)))
        forward = p1 - p2
        backward = -(p2 - p1)
        assert tuple(forward) == _approx(backward)


def test_compound_vs_simple():
    rng = random.Random(789)
    for _ in range(100):
        p0 = Point(*(rng.uniform(-20, 20) for _ in range(3)))
        v = Vector(*(rng.uniform(-20, 20) for _ in range(3)))
        p1 = Point(*p0)
        p1 += v
        p2 = p0 + v
        assert tuple(p1) == _approx(p2)
        p2 -= v
        assert tuple(p2) == _approx(p0)


def test_point_vector_roundtrip():
    rng = random.Random(321)
    for _ in range(100):
        p1 = Point(*(rng.uniform(-30, 30) for _ in range(3)))
        p2 = Point(*(rng.uniform(-30, 30) for _ in range(3)))
        rebuilt = p1 + (p2 - p1)
        assert tuple(rebuilt) == _approx(p2)


def test_index_inbounds_random():
    rng = random.Random(654)
    for _ in range(100):
        x, y, z = (rng.uniform(-10, 10) for _ in range(3))
        p = Point(x, y, z)
        assert (p[0], p[1], p[2]) == pytest.approx((x, y, z))