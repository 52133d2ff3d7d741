"""Points in 3D space."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Union

from .vector import Vector


@dataclass(slots=True)
class Point:
    """A location in 3D space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __post_init__(self) -> None:
        self.x = float(self.x)
        self.y = float(self.y)
        self.z = float(self.z)

    def __add__(self, v: Vector) -> "Point":
        if not isinstance(v, Vector):
            return NotImplemented
        return Point(self.x + v.x, self.y + v.y, self.z + v.z)

    def __sub__(self, other: Union["Point", Vector]) -> Union["Point", Vector]:
        """Point - Point gives a Vector; Point - Vector gives a Point."""
        if isinstance(other, Point):
            return Vector(self.x - other.x, self.y - other.y, self.z - other.z)
        if isinstance(other, Vector):
            return Point(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented

    def __getitem__(self, i: int) -> float:
        if i == 0:
            return self.x
        if i == 1:
            return self.y
        if i == 2:
            return self.z
        raise IndexError(f"Point has no component at index {i!r}")

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z