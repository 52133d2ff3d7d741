import pytest

from pbrtlite.bbox import Bbox
from pbrtlite.point import Point
from pbrtlite.ray import Ray
from pbrtlite.vector import Vector

EPS = 1e-6


def _xyz(p):
    return (p.x, p.y, p.z)


def test_default_constructor():
    b = Bbox()
    assert not b.contains_point(Point(0, 0, 0))
    c = Bbox(Point(0, 0, 0))
    assert not b.overlaps(c)


def test_point_constructor():
    p = Point(1.0, 2.0, 3.0)
    b = Bbox(p)
    assert _xyz(b.p_min) == pytest.approx((1, 2, 3), abs=EPS)
    assert _xyz(b.p_max) == pytest.approx((1, 2, 3), abs=EPS)
    assert b.contains_point(p)
    assert b.volume() == 0.0
    assert b.maximum_extent() == 2


def test_two_point_constructor_and_contains():
    p1 = Point(1, 4, -2)
    p2 = Point(-3, 0, 5)
    b = Bbox(p1, p2)
    assert _xyz(b.p_min) == pytest.approx((-3, 0, -2), abs=EPS)
    assert _xyz(b.p_max) == pytest.approx((1, 4, 5), abs=EPS)
    assert b.contains_point(p1)
    assert b.contains_point(p2)
    assert b.contains_point(Point(0, 2, 1))
    assert not b.contains_point(Point(2, 2, 1))


def test_overlaps():
    a = Bbox(Point(0, 0, 0), Point(2, 2, 2))
    b = Bbox(Point(1, 1, 1), Point(3, 3, 3))
    c = Bbox(Point(3, 3, 3), Point(4, 4, 4))
    assert a.overlaps(b)
    assert b.overlaps(a)
    assert not a.overlaps(c)
    assert not c.overlaps(a)


def test_intersect_p_through_center():
    b = Bbox(Point(0, 0, 0), Point(1, 1, 1))
    hit = b.intersect_p(Ray(Point(-1, 0.5, 0.5), Vector(1, 0, 0)))
    assert tuple(hit) == pytest.approx((1.0, 2.0), abs=EPS)


def test_intersect_p_miss():
    b = Bbox(Point(0, 0, 0), Point(1, 1, 1))
    assert b.intersect_p(Ray(Point(-1, 2, 0.5), Vector(1, 0, 0))) is None


def test_intersect_p_origin_inside():
    b = Bbox(Point(0, 0, 0), Point(1, 1, 1))
    r3 = Ray(Point(0.5, 0.5, 0.5), Vector(0, 1, 0))
    hit = b.intersect_p(r3)
    assert tuple(hit) == pytest.approx((r3.t_min, 0.5), abs=EPS)


def test_intersect_p_respects_t_max():
    b = Bbox(Point(0, 0, 0), Point(1, 1, 1))
    assert b.intersect_p(Ray(Point(-1, 0.5, 0.5), Vector(1, 0, 0), 0.0, 0.5)) is None


def test_volume_and_extent():
    b = Bbox(Point(0, 0, 0), Point(1, 2, 3))
    assert b.volume() == pytest.approx(6.0, abs=EPS)
    assert b.maximum_extent() == 2


@pytest.mark.parametrize(
    "corner, axis",
    [(Point(5, 1, 1), 0), (Point(1, 5, 1), 1), (Point(1, 1, 5), 2)],
)
def test_maximum_extent_each_axis(corner, axis):
    assert Bbox(Point(0, 0, 0), corner).maximum_extent() == axis


def test_union_with_point():
    a = Bbox(Point(0, 0, 0), Point(1, 1, 1))
    u1 = Bbox.union(a, Point(-1, 2, 0.5))
    assert _xyz(u1.p_min) == pytest.approx((-1, 0, 0), abs=EPS)
    assert _xyz(u1.p_max) == pytest.approx((1, 2, 1), abs=EPS)
    assert a == Bbox(Point(0, 0, 0), Point(1, 1, 1))


def test_union_with_box():
    a = Bbox(Point(0, 0, 0), Point(1, 1, 1))
    b2 = Bbox(Point(0.5, -1, 0), Point(2, 0, 0.5))
    u2 = Bbox.union(a, b2)
    assert _xyz(u2.p_min) == pytest.approx((0, -1, 0), abs=EPS)
    assert _xyz(u2.p_max) == pytest.approx((2, 1, 1), abs=EPS)


def test_union_of_empty_with_point_is_that_point():
    u = Bbox.union(Bbox(), Point(3, 4, 5))
    assert u == Bbox(Point(3, 4, 5))


def test_union_rejects_other_types():
    with pytest.raises(TypeError):
        Bbox.union(Bbox(), Vector(1, 2, 3))


def test_expand():
    e = Bbox(Point(0, 0, 0), Point(1, 1, 1))
    e.expand(0.5)
    assert _xyz(e.p_min) == pytest.approx((-0.5, -0.5, -0.5), abs=EPS)
    assert _xyz(e.p_max) == pytest.approx((1.5, 1.5, 1.5), abs=EPS)