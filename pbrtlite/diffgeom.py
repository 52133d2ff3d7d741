"""Local surface geometry at a point on a parametric surface."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from .point import Point
from .vector import Normal, Vector, cross, normalize

if TYPE_CHECKING:
    from .shape import Shape


@dataclass
class DifferentialGeometry:
    """Position, normal, (u, v) coordinates and partial derivatives at a surface point.

    All values are expected to be in world space.
    """

    p: Point = field(default_factory=Point)
    nn: Normal = field(default_factory=Normal)
    u: float = 0.0
    v: float = 0.0
    shape: Optional["Shape"] = None
    dpdu: Vector = field(default_factory=Vector)
    dpdv: Vector = field(default_factory=Vector)
    dndu: Vector = field(default_factory=Vector)
    dndv: Vector = field(default_factory=Vector)

    @staticmethod
    def from_partials(
        p: Point,
        dpdu: Vector,
        dpdv: Vector,
        dndu: Vector,
        dndv: Vector,
        u: float,
        v: float,
        shape: Optional["Shape"],
    ) -> "DifferentialGeometry":
        """Build the geometry, deriving the unit normal from dpdu x dpdv."""
        nn = Normal.from_vector(normalize(cross(dpdu, dpdv)))
        return DifferentialGeometry(
            p=p,
            nn=nn,
            u=u,
            v=v,
            shape=shape,
            dpdu=dpdu,
            dpdv=dpdv,
            dndu=dndu,
            dndv=dndv,
        )