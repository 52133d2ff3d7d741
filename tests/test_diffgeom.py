import math

import pytest

from pbrtlite.diffgeom import DifferentialGeometry
from pbrtlite.point import Point
from pbrtlite.vector import Normal, Vector, dot


def _make(dpdu, dpdv, shape=None):
    return DifferentialGeometry.from_partials(
        Point(1, 2, 3), dpdu, dpdv, Vector(), Vector(), 0.25, 0.75, shape
    )


def test_default_values():
    dg = DifferentialGeometry()
    assert dg.u == 0.0
    assert dg.v == 0.0
    assert dg.shape is None
    assert dg.p == Point(0, 0, 0)


def test_normal_of_axis_partials():
    dg = _make(Vector(1, 0, 0), Vector(0, 1, 0))
    assert dg.nn.x == pytest.approx(0.0)
    assert dg.nn.y == pytest.approx(0.0)
    assert dg.nn.z == pytest.approx(1.0)


def test_normal_is_unit_and_orthogonal():
    dpdu = Vector(2.0, -1.0, 0.5)
    dpdv = Vector(0.3, 4.0, -1.2)
    dg = _make(dpdu, dpdv)
    assert dg.nn.length() == pytest.approx(1.0)
    n = Vector.from_normal(dg.nn)
    assert dot(n, dpdu) == pytest.approx(0.0, abs=1e-12)
    assert dot(n, dpdv) == pytest.approx(0.0, abs=1e-12)


def test_swapping_partials_flips_normal():
    a = Vector(1.0, 2.0, 3.0)
    b = Vector(-2.0, 0.5, 1.0)
    n1 = _make(a, b).nn
    n2 = _make(b, a).nn
    assert n1.x == pytest.approx(-n2.x)
    assert n1.y == pytest.approx(-n2.y)
    assert n1.z == pytest.approx(-n2.z)


def test_fields_are_stored():
    dpdu = Vector(1, 0, 0)
    dpdv = Vector(0, 0, 1)
    marker = object()
    dg = _make(dpdu, dpdv, shape=marker)
    assert dg.p == Point(1, 2, 3)
    assert dg.u == 0.25
    assert dg.v == 0.75
    assert dg.dpdu == dpdu
    assert dg.dpdv == dpdv
    assert dg.shape is marker
    assert isinstance(dg.nn, Normal)