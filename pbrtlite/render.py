"""A small scene renderer that ray traces one sphere into an RGBA framebuffer."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Iterator, List, Optional, Sequence, Tuple

from .camera import OrthographicCamera
from .rtmath import CANVAS_HEIGHT, CANVAS_WIDTH, PI, TWOPI, clamp
from .sampling import Sample, StratifiedSampler
from .shape import Shape
from .sphere import Sphere
from .transform import Transform
from .vector import Vector, normalize

log = logging.getLogger(__name__)

_HIT_COLOR = Vector(0.9, 0.2, 0.9)
_SKY_TOP = Vector(0.5, 0.7, 1.0)
_SKY_BOTTOM = Vector(1.0, 1.0, 1.0)


def pack_rgba(r: int, g: int, b: int, a: int) -> int:
    """Pack four 8-bit channels into one 32-bit RGBA8888 value, red highest."""
    for name, value in (("r", r), ("g", g), ("b", b), ("a", a)):
        if not 0 <= value <= 255:
            raise ValueError(f"channel {name} must be in 0..255, got {value!r}")
    return (r << 24) | (g << 16) | (b << 8) | a


def _unpack_rgba(value: int) -> Tuple[int, int, int, int]:
    return (value >> 24) & 0xFF, (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF


def _to_byte(c: float) -> int:
    return int(255.0 * clamp(c, 0.0, 1.0))


class Framebuffer:
    """A width x height grid of packed RGBA8888 pixels, indexed by (x, y)."""

    __slots__ = ("width", "height", "_pixels")

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("framebuffer dimensions must be positive")
        self.width = width
        self.height = height
        self._pixels: List[int] = [0] * (width * height)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, tuple) or len(key) != 2:
            return False
        x, y = key
        return 0 <= x < self.width and 0 <= y < self.height

    def _offset(self, key: Tuple[int, int]) -> int:
        if key not in self:
            raise IndexError(f"pixel {key!r} is outside a {self.width}x{self.height} framebuffer")
        x, y = key
        return y * self.width + x

    def __getitem__(self, key: Tuple[int, int]) -> int:
        return self._pixels[self._offset(key)]

    def __setitem__(self, key: Tuple[int, int], value: int) -> None:
        if not 0 <= value <= 0xFFFFFFFF:
            raise ValueError("pixel value must be a 32-bit unsigned integer")
        self._pixels[self._offset(key)] = value

    def __iter__(self) -> Iterator[int]:
        return iter(self._pixels)

    def to_ppm(self) -> bytes:
        """Encode as a binary PPM (P6) image; alpha is dropped."""
        header = f"P6\n{self.width} {self.height}\n255\n".encode("ascii")
        body = bytearray()
        for value in self._pixels:
            r, g, b, _ = _unpack_rgba(value)
            body += bytes((r, g, b))
        return header + bytes(body)


class Renderer:
    """Scene, camera and sampler for a single clipped sphere seen orthographically."""

    def __init__(self, width: int = CANVAS_WIDTH, height: int = CANVAS_HEIGHT) -> None:
        self.width = width
        self.height = height
        self.aspect_ratio = float(width) / float(height)
        self.framebuffer = Framebuffer(width, height)
        self.t = 0.0

        self.screen = (-self.aspect_ratio, self.aspect_ratio, -1.0, 1.0)
        self.clip_near = 0.0
        self.clip_far = 10.0
        self.shutter_open = 0.0
        self.shutter_close = 0.0
        self.lens_radius = 1.0
        self.focal_distance = 1.0
        self.camera_to_world = Transform.translate(Vector(0.0, 0.0, 1.0))
        self.camera = OrthographicCamera(
            self.camera_to_world,
            self.screen,
            self.clip_near,
            self.clip_far,
            self.shutter_open,
            self.shutter_close,
            self.lens_radius,
            self.focal_distance,
        )

        self.sampler = StratifiedSampler(0, width, 0, height, 1, 1, False)

        log.info("[RTIOW] creating shapes ...")
        world_to_sphere = Transform.rotate_x(PI * 0.1) * Transform.translate(
            Vector(0.0, 0.0, -4.0)
        )
        self.shapes: List[Shape] = [
            Sphere(world_to_sphere.inverse(), False, 1.0, -1.0, 1.0, TWOPI * 0.8)
        ]

    def tick(self, dt: float) -> None:
        """Advance the scene clock by dt."""
        self.t += dt
        log.info("[RTIOW] ticked time by %f", dt)

    def texture_test(self) -> None:
        """Fill the framebuffer with a red/green gradient over constant blue."""
        for y in range(self.height):
            for x in range(self.width):
                r = int(255.0 * x / self.width)
                g = int(255.0 * y / self.height)
                self.framebuffer[x, y] = pack_rgba(r, g, 128, 255)

    def _shade(self, sample: Sample) -> Vector:
        _, ray = self.camera.generate_ray(sample)
        if any(shape.intersect(ray) is not None for shape in self.shapes):
            return _HIT_COLOR
        direction = normalize(ray.d)
        tt = 0.5 * (direction.y + 1.0)
        return _SKY_BOTTOM * (1.0 - tt) + _SKY_TOP * tt

    def sample_pixels(self) -> int:
        """Trace one ray per remaining sample into the framebuffer; return the sample count."""
        log.info("[RTIOW] sampling pixels ...")
        count = 0
        for sample in self.sampler:
            count += 1
            color = self._shade(sample)
            key = (int(sample.image_x), int(sample.image_y))
            if key in self.framebuffer:
                self.framebuffer[key] = pack_rgba(
                    _to_byte(color.x), _to_byte(color.y), _to_byte(color.z), 255
                )
        log.info("\tsampler generated %i samples", count)
        return count


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Render the scene once and write it to a PPM file."""
    parser = argparse.ArgumentParser(description="Ray trace a clipped sphere to a PPM image.")
    parser.add_argument("--width", type=int, default=CANVAS_WIDTH)
    parser.add_argument("--height", type=int, default=CANVAS_HEIGHT)
    parser.add_argument("-o", "--output", type=Path, default=Path("render.ppm"))
    args = parser.parse_args(argv)
    if args.width <= 0 or args.height <= 0:
        parser.error("width and height must be positive")

    logging.basicConfig(level=logging.INFO, format="%(message)s")
    log.info("[bbx] initializing ...")
    renderer = Renderer(args.width, args.height)
    renderer.sample_pixels()
    args.output.write_bytes(renderer.framebuffer.to_ppm())
    log.info("[rt] wrote %s (%i x %i)", args.output, args.width, args.height)
    return 0