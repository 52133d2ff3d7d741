"""Camera samples and the samplers that generate them."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from .rtmath import shuffle, stratified_sample_1d, stratified_sample_2d


@dataclass
class Sample:
    """Raster position, lens position and time for one camera sample."""

    image_x: float = math.inf
    image_y: float = math.inf
    lens_u: float = math.inf
    lens_v: float = math.inf
    time: float = 0.0
    n1d: List[int] = field(default_factory=list)
    n2d: List[int] = field(default_factory=list)
    one_d: List[List[float]] = field(default_factory=list)
    two_d: List[List[float]] = field(default_factory=list)


class Sampler(ABC):
    """Generates samples over the pixel range [x_start, x_end) x [y_start, y_end)."""

    def __init__(
        self, x_start: int, x_end: int, y_start: int, y_end: int, samples_per_pixel: int
    ) -> None:
        self.x_start = x_start
        self.x_end = x_end
        self.y_start = y_start
        self.y_end = y_end
        self.samples_per_pixel = samples_per_pixel

    @abstractmethod
    def get_next_sample(self) -> Optional[Sample]:
        """The next sample, or None once every pixel has been covered."""

    @abstractmethod
    def round_size(self, size: int) -> int:
        """The sample count this sampler would use for a requested size."""

    def total_samples(self) -> int:
        return (
            self.samples_per_pixel
            * (self.x_end - self.x_start)
            * (self.y_end - self.y_start)
        )

    def __iter__(self) -> Iterator[Sample]:
        while (sample := self.get_next_sample()) is not None:
            yield sample


class StratifiedSampler(Sampler):
    """Places samples on a regular per-pixel grid, optionally jittered."""

    def __init__(
        self,
        x_start: int,
        x_end: int,
        y_start: int,
        y_end: int,
        x_pixel_samples: int = 1,
        y_pixel_samples: int = 1,
        jitter: bool = False,
    ) -> None:
        if x_pixel_samples < 1 or y_pixel_samples < 1:
            raise ValueError("pixel sample counts must be at least 1")
        super().__init__(
            x_start, x_end, y_start, y_end, x_pixel_samples * y_pixel_samples
        )
        self.x_pixel_samples = x_pixel_samples
        self.y_pixel_samples = y_pixel_samples
        self.jitter = jitter
        self._x_pos = x_start
        self._y_pos = y_start
        self._finished = False
        self._generate_camera_samples()

    def _generate_camera_samples(self) -> None:
        n = self.samples_per_pixel
        nx, ny = self.x_pixel_samples, self.y_pixel_samples
        self._image = [
            (sx + self._x_pos, sy + self._y_pos)
            for sx, sy in stratified_sample_2d(nx, ny, self.jitter)
        ]
        self._lens = stratified_sample_2d(nx, ny, self.jitter)
        self._time = stratified_sample_1d(n, self.jitter)
        # decorrelate the sample dimensions
        shuffle(self._lens, n, 1)
        shuffle(self._time, n, 1)
        self._pos = 0

    def round_size(self, size: int) -> int:
        """Stratified sampling accepts any count, so the size is kept as an int."""
        return int(size)

    def get_next_sample(self) -> Optional[Sample]:
        if self._finished:
            return None
        if self._pos >= self.samples_per_pixel:
            self._x_pos += 1
            if self._x_pos == self.x_end:
                self._x_pos = self.x_start
                self._y_pos += 1
            if self._y_pos == self.y_end:
                self._finished = True
                return None
            self._generate_camera_samples()
        image_x, image_y = self._image[self._pos]
        lens_u, lens_v = self._lens[self._pos]
        sample = Sample(image_x, image_y, lens_u, lens_v, self._time[self._pos])
        self._pos += 1
        return sample