"""Improved Perlin gradient noise in two dimensions."""

from __future__ import annotations

import math

_PERMUTATION = (
    151, 160, 137, 91, 90, 15,
    131, 13, 201, 95, 96, 53, 194, 233, 7, 225, 140, 36, 103, 30, 69, 142, 8, 99, 37, 240, 21, 10, 23,
    190, 6, 148, 247, 120, 234, 75, 0, 26, 197, 62, 94, 252, 219, 203, 117, 35, 11, 32, 57, 177, 33,
    88, 237, 149, 56, 87, 174, 20, 125, 136, 171, 168, 68, 175, 74, 165, 71, 134, 139, 48, 27, 166,
    77, 146, 158, 231, 83, 111, 229, 122, 60, 211, 133, 230, 220, 105, 92, 41, 55, 46, 245, 40, 244,
    102, 143, 54, 65, 25, 63, 161, 1, 216, 80, 73, 209, 76, 132, 187, 208, 89, 18, 169, 200, 196,
    135, 130, 116, 188, 159, 86, 164, 100, 109, 198, 173, 186, 3, 64, 52, 217, 226, 250, 124, 123,
    5, 202, 38, 147, 118, 126, 255, 82, 85, 212, 207, 206, 59, 227, 47, 16, 58, 17, 182, 189, 28, 42,
    223, 183, 170, 213, 119, 248, 152, 2, 44, 154, 163, 70, 221, 153, 101, 155, 167, 43, 172, 9,
    129, 22, 39, 253, 19, 98, 108, 110, 79, 113, 224, 232, 178, 185, 112, 104, 218, 246, 97, 228,
    251, 34, 242, 193, 238, 210, 144, 12, 191, 179, 162, 241, 81, 51, 145, 235, 249, 14, 239, 107,
    49, 192, 214, 31, 181, 199, 106, 157, 184, 84, 204, 176, 115, 121, 50, 45, 127, 4, 150, 254,
    138, 236, 205, 93, 222, 114, 67, 29, 24, 72, 243, 141, 128, 195, 78, 66, 215, 61, 156, 180,
)

# Larger patterns come from smaller values; 0.005 to 0.01 works well.
_SAMPLE_SCALE = 0.0075


def _shuffled_table() -> tuple[int, ...]:
    """Permutation table: a seeded shuffle of the first half, the original order in the second."""
    table = list(_PERMUTATION)
    seed = 0
    for i in range(255, 0, -1):
        j = seed % (i + 1)
        table[i], table[j] = table[j], table[i]
        seed = (seed * 1103515245 + 12345) & 0x7FFFFFFF
    return tuple(table) + _PERMUTATION


def _fade(t: float) -> float:
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)


def _lerp(t: float, a: float, b: float) -> float:
    return a + t * (b - a)


def _grad(hash_value: int, x: float, y: float) -> float:
    h = hash_value & 15
    u = x if h < 8 else y
    if h < 4:
        v = y
    elif h in (12, 14):
        v = x
    else:
        v = 0.0
    return (u if h & 1 == 0 else -u) + (v if h & 2 == 0 else -v)


class PerlinGenerator:
    """Deterministic 2D gradient noise with values in [-1, 1]."""

    def __init__(self) -> None:
        self._p = _shuffled_table()

    def noise(self, x: float, y: float) -> float:
        """Noise value at (x, y)."""
        p = self._p
        fx = math.floor(x)
        fy = math.floor(y)
        cell_x = int(fx) & 255
        cell_y = int(fy) & 255
        x -= fx
        y -= fy
        u = _fade(x)
        v = _fade(y)
        a = p[cell_x] + cell_y
        b = p[cell_x + 1] + cell_y
        return _lerp(
            v,
            _lerp(u, _grad(p[a], x, y), _grad(p[b], x - 1, y)),
            _lerp(u, _grad(p[a + 1], x, y - 1), _grad(p[b + 1], x - 1, y - 1)),
        )


def generate_perlin_noise(
    width: int, height: int, octaves: int = 1, persistence: float = 0.5
) -> list[float]:
    """Row-major fractal noise map of ``width * height`` values stretched to [-1, 1]."""
    generator = PerlinGenerator()
    noise_map: list[float] = []
    for row in range(height):
        for col in range(width):
            total = 0.0
            amplitude = 1.0
            frequency = 1.0
            total_amplitude = 0.0
            for _ in range(octaves):
                total += amplitude * generator.noise(
                    col * _SAMPLE_SCALE * frequency, row * _SAMPLE_SCALE * frequency
                )
                total_amplitude += amplitude
                amplitude *= persistence
                frequency *= 2.0
            noise_map.append(total / total_amplitude)

    if not noise_map:
        return noise_map

    low = min(noise_map)
    high = max(noise_map)
    span = high - low
    if span == 0.0:
        raise ValueError("noise field is constant and cannot be normalised")
    return [2.0 * (value - low) / span - 1.0 for value in noise_map]