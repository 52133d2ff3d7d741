"""Affine and projective transformations held with their inverses."""

from __future__ import annotations

import math
from itertools import product
from typing import Iterable, Optional, Union

from .bbox import Bbox
from .mat4 import Mat4
from .point import Point
from .ray import Ray, RayDifferential
from .vector import Normal, Vector, cross, normalize

_Transformable = Union[Point, Vector, Normal, Ray, Bbox]


class Transform:
    """A 4x4 matrix m together with its inverse m_inv.

    With no matrix the transform is the identity; with a matrix only,
    the inverse is computed.
    """

    __slots__ = ("m", "m_inv")

    def __init__(
        self,
        m: Optional[Union[Mat4, Iterable]] = None,
        m_inv: Optional[Union[Mat4, Iterable]] = None,
    ) -> None:
        if m is None:
            self.m = Mat4()
            self.m_inv = self.m
            return
        self.m = m if isinstance(m, Mat4) else Mat4(m)
        if m_inv is None:
            self.m_inv = self.m.inverse()
        else:
            self.m_inv = m_inv if isinstance(m_inv, Mat4) else Mat4(m_inv)

    def __repr__(self) -> str:
        return f"Transform({self.m!r}, {self.m_inv!r})"

    def swaps_handedness(self) -> bool:
        """True if the upper 3x3 part has a negative determinant."""
        r = self.m.rows
        det = (
            r[0][0] * (r[1][1] * r[2][2] - r[1][2] * r[2][1])
            - r[0][1] * (r[1][0] * r[2][2] - r[1][2] * r[2][0])
            + r[0][2] * (r[1][0] * r[2][1] - r[1][1] * r[2][0])
        )
        return det < 0.0

    def inverse(self) -> "Transform":
        return Transform(self.m_inv, self.m)

    @staticmethod
    def translate(delta: Vector) -> "Transform":
        m = Mat4([1, 0, 0, delta.x, 0, 1, 0, delta.y, 0, 0, 1, delta.z, 0, 0, 0, 1])
        m_inv = Mat4([1, 0, 0, -delta.x, 0, 1, 0, -delta.y, 0, 0, 1, -delta.z, 0, 0, 0, 1])
        return Transform(m, m_inv)

    @staticmethod
    def scale(x: float, y: float, z: float) -> "Transform":
        if x == 0 or y == 0 or z == 0:
            raise ValueError("scale factors must be non-zero")
        m = Mat4([x, 0, 0, 0, 0, y, 0, 0, 0, 0, z, 0, 0, 0, 0, 1])
        m_inv = Mat4([1.0 / x, 0, 0, 0, 0, 1.0 / y, 0, 0, 0, 0, 1.0 / z, 0, 0, 0, 0, 1])
        return Transform(m, m_inv)

    @staticmethod
    def rotate_x(angle: float) -> "Transform":
        s, c = math.sin(angle), math.cos(angle)
        m = Mat4([1, 0, 0, 0, 0, c, -s, 0, 0, s, c, 0, 0, 0, 0, 1])
        return Transform(m, m.transpose())

    @staticmethod
    def rotate_y(angle: float) -> "Transform":
        s, c = math.sin(angle), math.cos(angle)
        m = Mat4([c, 0, s, 0, 0, 1, 0, 0, -s, 0, c, 0, 0, 0, 0, 1])
        return Transform(m, m.transpose())

    @staticmethod
    def rotate_z(angle: float) -> "Transform":
        s, c = math.sin(angle), math.cos(angle)
        m = Mat4([c, -s, 0, 0, s, c, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1])
        return Transform(m, m.transpose())

    @staticmethod
    def look_at(pos: Point, looking_at: Point, up: Vector) -> "Transform":
        """World-to-camera transform for a camera at pos looking at looking_at."""
        direction = normalize(looking_at - pos)
        right = cross(direction, normalize(up))
        new_up = cross(right, direction)
        camera_to_world = Mat4(
            [
                [right.x, new_up.x, -direction.x, pos.x],
                [right.y, new_up.y, -direction.y, pos.y],
                [right.z, new_up.z, -direction.z, pos.z],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )
        return Transform(camera_to_world.inverse(), camera_to_world)

    @staticmethod
    def orthographic(clip_near: float, clip_far: float) -> "Transform":
        """Maps z = clip_near to -1 and z = clip_far to +1."""
        mid = 0.5 * (clip_near + clip_far)
        scale_z = 2.0 / (clip_far - clip_near)
        return Transform.scale(1.0, 1.0, scale_z) * Transform.translate(Vector(0.0, 0.0, -mid))

    def __mul__(self, other: "Transform") -> "Transform":
        if not isinstance(other, Transform):
            return NotImplemented
        return Transform(self.m @ other.m, other.m_inv @ self.m_inv)

    def __call__(self, obj: _Transformable) -> _Transformable:
        """Apply the transform to a point, vector, normal, ray or box."""
        if isinstance(obj, Point):
            return self._point(obj)
        if isinstance(obj, Vector):
            return self._vector(obj)
        if isinstance(obj, Normal):
            return self._normal(obj)
        if isinstance(obj, RayDifferential):
            return RayDifferential(
                self._point(obj.o),
                self._vector(obj.d),
                obj.t_min,
                obj.t_max,
                obj.t,
                obj.has_differentials,
                self._ray(obj.rx),
                self._ray(obj.ry),
            )
        if isinstance(obj, Ray):
            return self._ray(obj)
        if isinstance(obj, Bbox):
            return self._bbox(obj)
        raise TypeError(f"cannot transform a {type(obj).__name__}")

    def _point(self, p: Point) -> Point:
        x, y, z = p.x, p.y, p.z
        xp, yp, zp, wp = (row[0] * x + row[1] * y + row[2] * z + row[3] for row in self.m.rows)
        if wp == 0:
            raise ZeroDivisionError("point is mapped to infinity")
        if wp == 1.0:
            return Point(xp, yp, zp)
        return Point(xp / wp, yp / wp, zp / wp)

    def _vector(self, v: Vector) -> Vector:
        r = self.m.rows
        return Vector(
            *(r[i][0] * v.x + r[i][1] * v.y + r[i][2] * v.z for i in range(3))
        )

    def _normal(self, n: Normal) -> Normal:
        mi = self.m_inv.rows
        return normalize(
            Normal(*(mi[0][i] * n.x + mi[1][i] * n.y + mi[2][i] * n.z for i in range(3)))
        )

    def _ray(self, ray: Ray) -> Ray:
        return Ray(self._point(ray.o), self._vector(ray.d), ray.t_min, ray.t_max, ray.t)

    def _bbox(self, box: Bbox) -> Bbox:
        result = Bbox()
        for x, y, z in product(
            (box.p_min.x, box.p_max.x), (box.p_min.y, box.p_max.y), (box.p_min.z, box.p_max.z)
        ):
            result = Bbox.union(result, self._point(Point(x, y, z)))
        return result