"""Spheres centred at the object-space origin, optionally clipped."""

from __future__ import annotations

import math
from typing import Optional, Tuple

from .bbox import Bbox
from .point import Point
from .ray import Ray
from .rtmath import TWOPI, clamp, solve_quadratic
from .shape import Shape
from .transform import Transform


class Sphere(Shape):
    """A sphere of the given radius, clipped to [z_min, z_max] and phi <= phi_max."""

    def __init__(
        self,
        object_to_world: Transform,
        reverse_orientation: bool = False,
        radius: float = 1.0,
        z_min: float = -TWOPI,
        z_max: float = TWOPI,
        phi_max: float = TWOPI,
    ) -> None:
        if radius <= 0:
            raise ValueError("sphere radius must be positive")
        super().__init__(object_to_world, reverse_orientation)
        self.radius = float(radius)
        self.z_min = clamp(min(z_min, z_max), -self.radius, self.radius)
        self.z_max = clamp(max(z_min, z_max), -self.radius, self.radius)
        self.theta_min = math.acos(self.z_min / self.radius)
        self.theta_max = math.acos(self.z_max / self.radius)
        self.phi_max = phi_max

    def object_bound(self) -> Bbox:
        r = self.radius
        return Bbox(Point(-r, -r, self.z_min), Point(r, r, self.z_max))

    def _roots(self, r: Ray) -> Optional[Tuple[float, float]]:
        o, d = r.o, r.d
        a = d.x * d.x + d.y * d.y + d.z * d.z
        b = 2.0 * (d.x * o.x + d.y * o.y + d.z * o.z)
        c = o.x * o.x + o.y * o.y + o.z * o.z - self.radius * self.radius
        return solve_quadratic(a, b, c)

    def _clipped(self, p: Point) -> bool:
        phi = math.atan2(p.y, p.x)
        if phi < 0.0:
            phi += TWOPI
        return p.z < self.z_min or p.z > self.z_max or phi > self.phi_max

    def intersect(self, ray: Ray) -> Optional[float]:
        """Nearest hit parameter within the ray's range, honouring clipping."""
        r = self.world_to_object(ray)
        roots = self._roots(r)
        if roots is None:
            return None
        t0, t1 = roots
        if t0 > ray.t_max or t1 < ray.t_min:
            return None
        t_hit = t0
        if t0 < ray.t_min:
            t_hit = t1
            if t_hit > ray.t_max:
                return None
        if self._clipped(r(t_hit)):
            if t_hit == t1 or t1 > ray.t_max:
                return None
            t_hit = t1
            if self._clipped(r(t_hit)):
                return None
        return t_hit

    def does_intersect(self, ray: Ray) -> bool:
        """True if the ray hits the full sphere; clipping is not considered."""
        r = self.world_to_object(ray)
        roots = self._roots(r)
        if roots is None:
            return False
        t0, t1 = roots
        if t0 > ray.t_max or t1 < ray.t_min:
            return False
        if t0 < ray.t_min and t1 > ray.t_max:
            return False
        return True