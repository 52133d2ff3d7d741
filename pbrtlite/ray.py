"""Rays and ray differentials."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .point import Point
from .rtmath import RAY_EPSILON
from .vector import Vector


@dataclass
class Ray:
    """A half-line o + d*t, valid for t in [t_min, t_max], at time t."""

    o: Point = field(default_factory=Point)
    d: Vector = field(default_factory=Vector)
    t_min: float = RAY_EPSILON
    t_max: float = math.inf
    t: float = 0.0

    def __call__(self, t: float) -> Point:
        """The point reached after travelling parameter t along the ray."""
        return self.o + self.d * t


@dataclass
class RayDifferential(Ray):
    """A ray carrying two offset rays used for antialiasing."""

    has_differentials: bool = False
    rx: Ray = field(default_factory=Ray)
    ry: Ray = field(default_factory=Ray)

    @staticmethod
    def from_ray(ray: Ray) -> "RayDifferential":
        """Copy a plain ray into a ray differential without differentials."""
        return RayDifferential(
            Point(*ray.o), Vector(*ray.d), ray.t_min, ray.t_max, ray.t
        )