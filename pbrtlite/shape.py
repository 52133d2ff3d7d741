"""Abstract base for geometric shapes living in their own object space."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from .bbox import Bbox
from .ray import Ray
from .transform import Transform


class Shape(ABC):
    """A shape with transforms between object space and world space."""

    def __init__(self, object_to_world: Transform, reverse_orientation: bool = False) -> None:
        self.object_to_world = object_to_world
        self.world_to_object = object_to_world.inverse()
        self.reverse_orientation = reverse_orientation
        self.transform_swaps_handedness = object_to_world.swaps_handedness()

    @abstractmethod
    def object_bound(self) -> Bbox:
        """Bounding box in object space."""

    @abstractmethod
    def intersect(self, ray: Ray) -> Optional[float]:
        """Parameter of the nearest valid hit along a world-space ray, or None."""

    @abstractmethod
    def does_intersect(self, ray: Ray) -> bool:
        """True if the world-space ray hits the shape at all."""

    def world_bound(self) -> Bbox:
        """Bounding box in world space."""
        return self.object_to_world(self.object_bound())

    def is_intersectable(self) -> bool:
        return True