# cosmic

Building blocks for rendering the accretion disk around a spinning (Kerr)
black hole:

- `cosmic.config` – configuration of the black hole, the camera plane and the
  output file name, plus the default constants (integration tolerances, disk
  tolerance, colour-map thresholds).
- `cosmic.metric` – the Kerr metric in Boyer–Lindquist coordinates with its
  radial and polar derivatives, and the right-hand side of the photon
  geodesic equations.
- `cosmic.imaging` – normalisation of intensity buffers, the "hot" colour
  map, an ASCII PPM writer and small helpers for worker counts and buffer
  sizes.
- `cosmic.perlin` – seeded, reproducible 2D Perlin noise.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Configuration

```python
from cosmic.config import BlackHole, Image, OutputConfig

black_hole = BlackHole()             # spin 0.99, mass 1, observer at 500 M, 85°
black_hole.set_observer_angle(80.0)  # inclination given in degrees

image = Image()
image.set_scale(12)                  # 16:9 aspect, 192 x 108 pixels
print(image.width(), image.height(), image.num_pixels())

output = OutputConfig()
output.set_descriptive_filename(black_hole, image, "bh_cpu")
print(output.full_path())
# data/bh_cpu_spin0.99_mass1_dist500_theta80_phi0_192x108.ppm
```

`BlackHole.disk_tolerance` defaults to 1.01 times the outer horizon radius;
a spin larger than the mass raises `ValueError`.
`BlackHole.with_spin(0.5)` builds a default configuration with a different
spin and a horizon tolerance computed for unit mass.

`Image` keeps its camera plane (`offset_x`, `offset_y`, `step_x`, `step_y`)
in step with `set_aspect_ratio` and `set_scale`.

## The metric

```python
from cosmic.metric import BoyerLindquistMetric

metric = BoyerLindquistMetric(0.99, 1.0)
metric.compute(500.0, 1.48)
print(metric.alpha, metric.g_11)
k = metric.derivatives([500.0, 1.48, 0.0, -1.0, 0.0, 0.0])
```

`compute(r, theta)` fills in the lapse `alpha`, shift `beta3`, the inverse
spatial metric `gamma11`, `gamma22`, `gamma33`, the covariant components
`g_00`, `g_03`, `g_11`, `g_22`, `g_33` and their derivatives with respect to
`r` and `theta`, and returns the metric itself.
`derivatives` takes the photon state `(r, theta, phi, u_r, u_theta, u_phi)`
and returns its six time derivatives; `u_phi` is conserved, so the last one
is always `0.0`.

## Images

```python
from cosmic.imaging import normalize, hot_colormap, write_ppm

buffer = normalize([0.0, 0.5, 2.0, 1.0])
print(hot_colormap(0.5))
write_ppm("disk.ppm", buffer, 2, 2)
```

`normalize` divides by the largest value and raises `ValueError` when there
is no positive one. `hot_colormap` follows the matplotlib "hot" map: black to
red to yellow to white. `write_ppm` writes an ASCII (P3) image row by row and
raises `ValueError` when the buffer does not hold `width * height` values.

`resolve_threads(requested, available)` turns a requested worker count into
the one to use (`ThreadCount.DEFAULT` means all available, `ThreadCount.SINGLE`
means one, too many falls back to all available with a `RuntimeWarning`).
`buffer_size_mb(num_pixels)` gives the size of a single-precision buffer in
MiB.

## Perlin noise

```python
from cosmic.perlin import PerlinGenerator, generate_perlin_noise

value = PerlinGenerator().noise(1.5, 2.25)
noise = generate_perlin_noise(256, 256, 4, 0.5)
```

The map is a row-major list of `width * height` values rescaled to the full
range `[-1, 1]`. The permutation table is shuffled with a fixed seed, so the
output is reproducible.

## What it does not do

The package provides the metric, configuration and image pieces, but no
geodesic integrator and no ray tracer that launches a ray per pixel and turns
disk hits into intensities. There is no command that renders a black hole
image, and nothing is drawn on screen; images are only written as PPM files
by `write_ppm`.