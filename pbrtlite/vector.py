"""Three-component vectors and surface normals."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Iterator, TypeVar, Union


def _component(obj: Union["Vector", "Normal"], i: int) -> float:
    if i == 0:
        return obj.x
    if i == 1:
        return obj.y
    if i == 2:
        return obj.z
    raise IndexError(f"{type(obj).__name__} has no component at index {i!r}")


@dataclass(slots=True)
class Vector:
    """A direction or displacement in 3D space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __post_init__(self) -> None:
        self.x = float(self.x)
        self.y = float(self.y)
        self.z = float(self.z)

    @staticmethod
    def from_normal(n: "Normal") -> "Vector":
        """Build a vector with the same components as a normal."""
        return Vector(n.x, n.y, n.z)

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def __add__(self, other: "Vector") -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector") -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, f: float) -> "Vector":
        if not isinstance(f, Real):
            return NotImplemented
        return Vector(self.x * f, self.y * f, self.z * f)

    def __rmul__(self, f: float) -> "Vector":
        return self.__mul__(f)

    def __truediv__(self, f: float) -> "Vector":
        if not isinstance(f, Real):
            return NotImplemented
        return Vector(self.x / f, self.y / f, self.z / f)

    def __neg__(self) -> "Vector":
        return Vector(-self.x, -self.y, -self.z)

    def __getitem__(self, i: int) -> float:
        return _component(self, i)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z


@dataclass(slots=True)
class Normal:
    """A surface normal; kept distinct from Vector on purpose."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __post_init__(self) -> None:
        self.x = float(self.x)
        self.y = float(self.y)
        self.z = float(self.z)

    @staticmethod
    def from_vector(v: Vector) -> "Normal":
        """Build a normal with the same components as a vector."""
        return Normal(v.x, v.y, v.z)

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def __add__(self, other: "Normal") -> "Normal":
        if not isinstance(other, Normal):
            return NotImplemented
        return Normal(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Normal") -> "Normal":
        if not isinstance(other, Normal):
            return NotImplemented
        return Normal(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, f: float) -> "Normal":
        if not isinstance(f, Real):
            return NotImplemented
        return Normal(self.x * f, self.y * f, self.z * f)

    def __rmul__(self, f: float) -> "Normal":
        return self.__mul__(f)

    def __truediv__(self, f: float) -> "Normal":
        if not isinstance(f, Real):
            return NotImplemented
        if f == 0:
            raise ZeroDivisionError("cannot divide a Normal by zero")
        inv = 1.0 / f
        return Normal(self.x * inv, self.y * inv, self.z * inv)

    def __neg__(self) -> "Normal":
        return Normal(-self.x, -self.y, -self.z)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z


_V = TypeVar("_V", Vector, Normal)


def dot(a: _V, b: _V) -> float:
    """Dot product of two vectors or two normals."""
    return a.x * b.x + a.y * b.y + a.z * b.z


def dot_abs(a: _V, b: _V) -> float:
    """Absolute value of the dot product."""
    return abs(dot(a, b))


def cross(a: Vector, b: Vector) -> Vector:
    """Cross product; defined for vectors only."""
    if not (isinstance(a, Vector) and isinstance(b, Vector)):
        raise TypeError("cross product is only defined for Vector operands")
    return Vector(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )


def normalize(v: _V) -> _V:
    """Return v scaled to unit length, keeping its type."""
    return v / v.length()