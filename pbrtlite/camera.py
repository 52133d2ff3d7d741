"""Cameras that turn image samples into world-space rays."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional, Sequence, Tuple

from .point import Point
from .ray import Ray
from .rtmath import CANVAS_HEIGHT, CANVAS_WIDTH, lerp
from .sampling import Sample
from .transform import Transform
from .vector import Vector, normalize


class Camera(ABC):
    """Common state of every camera: placement, clipping range and shutter."""

    def __init__(
        self,
        world_to_camera: Transform,
        clip_near: float,
        clip_far: float,
        shutter_open: float = 0.0,
        shutter_close: float = 0.0,
        film: Optional[Any] = None,
    ) -> None:
        self.world_to_camera = world_to_camera
        self.camera_to_world = world_to_camera.inverse()
        self.clip_near = clip_near
        self.clip_far = clip_far
        self.shutter_open = shutter_open
        self.shutter_close = shutter_close
        self.film = film

    @abstractmethod
    def generate_ray(self, sample: Sample) -> Tuple[float, Ray]:
        """The weight of the ray and the world-space ray for a sample."""


class ProjectiveCamera(Camera):
    """A camera defined by a projection onto a screen window.

    screen holds the window bounds in the order used to map it onto the
    raster: screen[0] to screen[1] horizontally, screen[3] to screen[2]
    vertically.
    """

    def __init__(
        self,
        world_to_camera: Transform,
        projection: Transform,
        screen: Sequence[float],
        clip_near: float,
        clip_far: float,
        shutter_open: float,
        shutter_close: float,
        lens_radius: float,
        focal_distance: float,
        film: Optional[Any] = None,
    ) -> None:
        super().__init__(
            world_to_camera, clip_near, clip_far, shutter_open, shutter_close, film
        )
        if len(screen) != 4:
            raise ValueError("screen window needs exactly four values")
        s0, s1, s2, s3 = (float(v) for v in screen)
        if s1 == s0 or s2 == s3:
            raise ValueError("screen window must have non-zero width and height")
        self.screen = (s0, s1, s2, s3)
        self.lens_radius = lens_radius
        self.focal_distance = focal_distance

        self.camera_to_screen = projection
        self.world_to_screen = projection * world_to_camera
        self.screen_to_raster = (
            Transform.scale(float(CANVAS_WIDTH), float(CANVAS_HEIGHT), 1.0)
            * Transform.scale(1.0 / (s1 - s0), 1.0 / (s2 - s3), 1.0)
            * Transform.translate(Vector(-s0, -s3, 0.0))
        )
        self.raster_to_screen = self.screen_to_raster.inverse()
        self.raster_to_camera = projection.inverse() * self.raster_to_screen


class OrthographicCamera(ProjectiveCamera):
    """A camera whose rays all travel along +z in camera space."""

    def __init__(
        self,
        world_to_camera: Transform,
        screen: Sequence[float],
        clip_near: float,
        clip_far: float,
        shutter_open: float,
        shutter_close: float,
        lens_radius: float,
        focal_distance: float,
        film: Optional[Any] = None,
    ) -> None:
        super().__init__(
            world_to_camera,
            Transform.orthographic(clip_near, clip_far),
            screen,
            clip_near,
            clip_far,
            shutter_open,
            shutter_close,
            lens_radius,
            focal_distance,
            film,
        )

    def generate_ray(self, sample: Sample) -> Tuple[float, Ray]:
        origin = self.raster_to_camera(Point(sample.image_x, sample.image_y, 0.0))
        ray = Ray(
            origin,
            normalize(Vector(0.0, 0.0, 1.0)),
            0.0,
            self.clip_far - self.clip_near,
            lerp(sample.time, self.shutter_open, self.shutter_close),
        )
        # depth of field for lens_radius > 0 is not modelled
        return 1.0, self.camera_to_world(ray)