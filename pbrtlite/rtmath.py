"""Shared constants, numeric helpers, random numbers and sampling patterns."""

from __future__ import annotations

import math
import random
from typing import MutableSequence, Optional, Sequence, Tuple

from .vector import Vector

CANVAS_WIDTH = 800
CANVAS_HEIGHT = 600

PI = 3.14159265358979323846
TWOPI = 6.283185482025146484375
ONE_OVER_PI = 0.31830988618379067154
ONE_OVER_TWOPI = 0.15915494309189533577

RAY_EPSILON = 1e-3

SPECTRUM_COLORSAMPLES = 3

_rng = random.Random()


def solve_quadratic(a: float, b: float, c: float) -> Optional[Tuple[float, float]]:
    """Return the real roots of a*t^2 + b*t + c in ascending order, or None."""
    discriminant = b * b - 4.0 * a * c
    if discriminant < 0.0:
        return None
    root = math.sqrt(discriminant)
    q = -0.5 * (b - root) if b < 0 else -0.5 * (b + root)
    if a == 0 or q == 0:
        return None
    t0 = q / a
    t1 = c / q
    if t0 > t1:
        t0, t1 = t1, t0
    return t0, t1


def clamp(value: float, low: float, high: float) -> float:
    """Clamp value into the inclusive range [low, high]."""
    if value <= low:
        return low
    if value >= high:
        return high
    return value


def lerp(t: float, v1: float, v2: float) -> float:
    """Linear interpolation between v1 (t=0) and v2 (t=1)."""
    return (1.0 - t) * v1 + t * v2


def mod(i: int, m: int) -> int:
    """Remainder of i by m using truncated division, shifted up when negative."""
    q = abs(i) // abs(m)
    if (i < 0) != (m < 0):
        q = -q
    r = i - q * m
    if r < 0:
        r += m
    return r


def radians(deg: float) -> float:
    return (PI / 180.0) * deg


def degrees(rad: float) -> float:
    return (180.0 / PI) * rad


def seed(value: int) -> None:
    """Reseed the shared random number generator."""
    _rng.seed(value)


def random_float() -> float:
    """Uniform float in [0, 1)."""
    return _rng.random()


def random_uint() -> int:
    """Uniform unsigned 32-bit integer."""
    return _rng.getrandbits(32)


def spherical_direction(sin_theta: float, cos_theta: float, phi: float) -> Vector:
    """Unit vector for the given spherical angles."""
    return Vector(sin_theta * math.cos(phi), sin_theta * math.sin(phi), cos_theta)


def spherical_theta(v: Vector) -> float:
    """Polar angle of a unit vector."""
    return math.acos(clamp(v.z, -1.0, 1.0))


def spherical_phi(v: Vector) -> float:
    """Azimuthal angle of a vector in [0, 2*pi)."""
    p = math.atan2(v.y, v.x)
    return p + TWOPI if p < 0.0 else p


def solve_linear_system_2x2(
    a: Sequence[Sequence[float]], b: Sequence[float]
) -> Optional[Tuple[float, float]]:
    """Solve a @ x = b for a 2x2 system; None when nearly singular."""
    det = a[0][0] * a[1][1] - a[0][1] * a[1][0]
    if abs(det) < 1e-5:
        return None
    det_inv = 1.0 / det
    x0 = (a[1][1] * b[0] - a[0][1] * b[1]) * det_inv
    x1 = (a[0][0] * b[1] - a[1][0] * b[0]) * det_inv
    return x0, x1


def stratified_sample_1d(n_samples: int, jitter: bool) -> list:
    """One sample per stratum of [0, 1), centred unless jittered."""
    inv = 1.0 / n_samples
    return [
        (i + (random_float() if jitter else 0.5)) * inv for i in range(n_samples)
    ]


def stratified_sample_2d(n_x: int, n_y: int, jitter: bool) -> list:
    """One (x, y) sample per cell of an n_x by n_y grid over [0, 1)^2, row by row."""
    d_x = 1.0 / n_x
    d_y = 1.0 / n_y
    samples = []
    for y in range(n_y):
        for x in range(n_x):
            j_x = random_float() if jitter else 0.5
            j_y = random_float() if jitter else 0.5
            samples.append(((x + j_x) * d_x, (y + j_y) * d_y))
    return samples


def shuffle(samples: MutableSequence, count: int, dimensions: int) -> None:
    """Shuffle, in place, the first count records of dimensions consecutive items."""
    d = dimensions
    for i in range(count):
        other = random_uint() % count
        if other == i:
            continue
        mine = slice(i * d, (i + 1) * d)
        theirs = slice(other * d, (other + 1) * d)
        samples[mine], samples[theirs] = samples[theirs], samples[mine]