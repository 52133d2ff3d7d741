"""Axis-aligned 3D bounding boxes."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Optional, Tuple, Union

from .point import Point
from .vector import Vector

if TYPE_CHECKING:
    from .ray import Ray


class Bbox:
    """An axis-aligned box spanning p_min to p_max.

    With no arguments the box is empty (inverted, containing nothing);
    with one point it is degenerate at that point; with two it spans both.
    """

    __slots__ = ("p_min", "p_max")

    def __init__(self, p1: Optional[Point] = None, p2: Optional[Point] = None) -> None:
        if p1 is None and p2 is None:
            self.p_min = Point(math.inf, math.inf, math.inf)
            self.p_max = Point(-math.inf, -math.inf, -math.inf)
        elif p2 is None or p1 is None:
            p = p1 if p1 is not None else p2
            self.p_min = Point(*p)
            self.p_max = Point(*p)
        else:
            self.p_min = Point(min(p1.x, p2.x), min(p1.y, p2.y), min(p1.z, p2.z))
            self.p_max = Point(max(p1.x, p2.x), max(p1.y, p2.y), max(p1.z, p2.z))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bbox):
            return NotImplemented
        return self.p_min == other.p_min and self.p_max == other.p_max

    def __repr__(self) -> str:
        return f"Bbox({self.p_min!r}, {self.p_max!r})"

    def overlaps(self, box: "Bbox") -> bool:
        """True if this box and box share any point."""
        return all(
            hi >= other_lo and lo <= other_hi
            for lo, hi, other_lo, other_hi in zip(self.p_min, self.p_max, box.p_min, box.p_max)
        )

    def contains_point(self, p: Point) -> bool:
        return all(lo <= c <= hi for lo, c, hi in zip(self.p_min, p, self.p_max))

    def intersect_p(self, ray: "Ray") -> Optional[Tuple[float, float]]:
        """Entry and exit parameters of ray through the box, or None on a miss."""
        t0 = ray.t_min
        t1 = ray.t_max
        for lo, hi, o, d in zip(self.p_min, self.p_max, ray.o, ray.d):
            inv = 1.0 / d if d != 0.0 else math.copysign(math.inf, d)
            t_near = (lo - o) * inv
            t_far = (hi - o) * inv
            if t_near > t_far:
                t_near, t_far = t_far, t_near
            t0 = max(t0, t_near)
            t1 = min(t1, t_far)
            if t0 > t1:
                return None
        return t0, t1

    def volume(self) -> float:
        d = self.p_max - self.p_min
        return d.x * d.y * d.z

    def maximum_extent(self) -> int:
        """Index of the longest axis: 0 for x, 1 for y, 2 for z."""
        d = self.p_max - self.p_min
        if d.x > d.y and d.x > d.z:
            return 0
        if d.y > d.z:
            return 1
        return 2

    @staticmethod
    def union(box: "Bbox", other: Union["Bbox", Point]) -> "Bbox":
        """A new box enclosing box and a point or another box."""
        if isinstance(other, Point):
            lo, hi = other, other
        elif isinstance(other, Bbox):
            lo, hi = other.p_min, other.p_max
        else:
            raise TypeError("Bbox.union takes a Point or a Bbox")
        result = Bbox()
        result.p_min = Point(*(min(a, b) for a, b in zip(box.p_min, lo)))
        result.p_max = Point(*(max(a, b) for a, b in zip(box.p_max, hi)))
        return result

    def expand(self, delta: float) -> None:
        """Grow the box by delta on every side, in place."""
        d = Vector(delta, delta, delta)
        self.p_min = self.p_min - d
        self.p_max = self.p_max + d