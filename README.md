# pbrtlite

A compact ray tracing toolkit in pure Python, built around the classic
physically based rendering architecture: geometric primitives,
transforms that carry their inverses, shapes in their own object space,
samplers and cameras. It has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is in it

- `pbrtlite.vector`: `Vector` and `Normal` (dataclasses with `x`, `y`,
  `z`), supporting `+`, `-`, scalar `*` and `/`, unary `-`,
  `length()` and `length_squared()`; conversion with
  `Vector.from_normal()` and `Normal.from_vector()`; and the functions
  `dot`, `dot_abs`, `cross` (vectors only) and `normalize`.
  `Vector` can be indexed with 0, 1 or 2; any other index raises
  `IndexError`. Dividing a `Normal` by zero raises `ZeroDivisionError`.
- `pbrtlite.point`: `Point`. `Point + Vector` and `Point - Vector` give
  a `Point`; `Point - Point` gives a `Vector`. Points are indexable like
  vectors.
- `pbrtlite.mat4`: `Mat4`, an immutable 4x4 matrix. `Mat4()` is the
  identity; it can also be built from 16 values in row-major order or
  from four rows of four. Elements are read with `m[r, c]`, rows with
  `m[r]`. It supports `@`, `transpose()`, `inverse()` (Gauss-Jordan;
  returns the identity for a singular matrix) and `str()`.
- `pbrtlite.transform`: `Transform`, holding `m` and `m_inv`. Build
  transforms with `translate`, `scale`, `rotate_x`, `rotate_y`,
  `rotate_z`, `look_at` and `orthographic` (which maps `z = clip_near`
  to -1 and `z = clip_far` to +1); combine them with `*`; invert with
  `inverse()`; test `swaps_handedness()`. Calling a transform applies it
  to a `Point`, `Vector`, `Normal` (result normalized), `Ray`,
  `RayDifferential` or `Bbox`.
- `pbrtlite.ray`: `Ray` (origin `o`, direction `d`, `t_min`, `t_max`,
  time `t`); `ray(t)` gives the point at parameter `t`.
  `RayDifferential` adds `has_differentials`, `rx` and `ry`, and
  `RayDifferential.from_ray()` copies a plain ray.
- `pbrtlite.bbox`: `Bbox`, an axis-aligned box. `Bbox()` is empty,
  `Bbox(p)` is a single point, `Bbox(p1, p2)` spans two corners. Methods:
  `overlaps`, `contains_point`, `intersect_p` (returns `(t0, t1)` or
  `None`), `volume`, `maximum_extent` (0, 1 or 2), `expand` (in place)
  and the static `Bbox.union(box, point_or_box)`.
- `pbrtlite.shape`: the abstract `Shape`, with `object_bound`,
  `intersect`, `does_intersect`, `world_bound` and `is_intersectable`.
- `pbrtlite.sphere`: `Sphere`, centred at its object-space origin and
  optionally clipped by `z_min`, `z_max` and `phi_max`. `intersect(ray)`
  returns the nearest hit parameter within the ray's range, honouring
  clipping, or `None`; `does_intersect(ray)` tests the full sphere.
- `pbrtlite.diffgeom`: `DifferentialGeometry`, with
  `from_partials()` deriving the unit normal from `dpdu x dpdv`.
- `pbrtlite.sampling`: `Sample`, the abstract `Sampler` (iterable,
  with `total_samples()`) and `StratifiedSampler`, which walks pixels row
  by row, placing `x_pixel_samples * y_pixel_samples` samples per pixel,
  centred in their strata or jittered.
- `pbrtlite.camera`: `Camera`, `ProjectiveCamera` and
  `OrthographicCamera`. `generate_ray(sample)` returns
  `(weight, world_space_ray)`.
- `pbrtlite.rtmath`: constants (`CANVAS_WIDTH`, `CANVAS_HEIGHT`, `PI`,
  `TWOPI`, `RAY_EPSILON`, ...) and helpers: `solve_quadratic`
  (roots in ascending order or `None`), `clamp`, `lerp`, `mod`,
  `radians`, `degrees`, `spherical_direction`, `spherical_theta`,
  `spherical_phi`, `solve_linear_system_2x2`, `stratified_sample_1d`,
  `stratified_sample_2d`, `shuffle`, and a shared random generator
  (`seed`, `random_float`, `random_uint`).
- `pbrtlite.render`: `Framebuffer` (packed RGBA8888 pixels indexed by
  `(x, y)`, with `to_ppm()`), `pack_rgba`, and `Renderer`, which sets
  up the demo scene and offers `sample_pixels()` (returns the number of
  samples traced), `texture_test()` (a gradient fill) and `tick(dt)`.

## Example

```python
from pbrtlite.vector import Vector, cross, normalize
from pbrtlite.point import Point
from pbrtlite.transform import Transform

p = Point(1, 2, 3) + Vector(1, 1, 1)          # Point(2.0, 3.0, 4.0)
n = normalize(cross(Vector(1, 0, 0), Vector(0, 1, 0)))

move = Transform.translate(Vector(5, 0, 0))
spin = Transform.rotate_z(0.5)
both = move * spin                            # applies spin, then move
q = both(Point(1, 0, 0))
back = both.inverse()(q)                      # close to Point(1, 0, 0)

m = Transform.scale(2, 3, 4).m
identity = m @ m.inverse()
```

Testing a ray against a sphere placed in the world:

```python
from pbrtlite.ray import Ray
from pbrtlite.sphere import Sphere

world_to_sphere = Transform.translate(Vector(0, 0, -4))
sphere = Sphere(world_to_sphere.inverse(), False, 1.0, -1.0, 1.0, 6.283185)
ray = Ray(Point(0, 0, 0), Vector(0, 0, -1))
print(sphere.does_intersect(ray))
print(sphere.intersect(ray))
```

## Command line

```
pbrtlite-render [--width W] [--height H] [-o OUTPUT]
```

renders the demo scene — a partially clipped sphere in front of a sky
gradient, seen through an orthographic camera with one stratified sample
per pixel — and writes it as a binary PPM file (`render.ppm` by
default, 800 x 600). Progress messages go to the log.

## What it does not do

- There is no window or interactive display; the renderer only writes
  an image file.
- Shading is flat: a hit is coloured a fixed purple, a miss shows the
  sky gradient. There are no materials, lights or integrators.
- `Sphere.intersect` returns only the hit parameter; it does not fill in
  surface geometry.
- Cameras ignore `lens_radius`, so there is no depth of field, and the
  `film` argument is stored but not used.