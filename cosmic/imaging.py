"""Post-processing of intensity buffers: normalisation, colour map and PPM output."""

from __future__ import annotations

import enum
import os
import warnings
from typing import Sequence

from cosmic.config import RED_THRESHOLD, YELLOW_THRESHOLD

_FLOAT_BYTES = 4


class ThreadCount(enum.IntEnum):
    """Named worker-count choices."""

    DEFAULT = 0
    SINGLE = 1
    MANUAL = 24


def normalize(buffer: Sequence[float]) -> list[float]:
    """Divide every intensity by the largest one."""
    peak = max(buffer, default=0.0)
    peak = max(peak, 0.0)
    if peak == 0.0:
        raise ValueError("buffer has no positive intensity to normalise by")
    return [value / peak for value in buffer]


def hot_colormap(value: float) -> tuple[int, int, int]:
    """Black to red to yellow to white colour for an intensity in [0, 1]."""
    if value < RED_THRESHOLD:
        return int(value / RED_THRESHOLD * 255), 0, 0
    if value < YELLOW_THRESHOLD:
        green = int((value - RED_THRESHOLD) / (YELLOW_THRESHOLD - RED_THRESHOLD) * 255)
        return 255, green, 0
    blue = int((value - YELLOW_THRESHOLD) / (1.0 - YELLOW_THRESHOLD) * 255)
    return 255, 255, blue


def write_ppm(
    path: str | os.PathLike[str], buffer: Sequence[float], width: int, height: int
) -> None:
    """Write a row-major intensity buffer as a plain-text PPM image."""
    if len(buffer) != width * height:
        raise ValueError(
            f"buffer holds {len(buffer)} values, expected {width}x{height}"
        )
    with open(path, "w", encoding="ascii") as out:
        out.write(f"P3\n{width} {height}\n255\n")
        for start in range(0, width * height, width):
            row = buffer[start:start + width]
            out.write("".join("{} {} {} ".format(*hot_colormap(v)) for v in row))
            out.write("\n")


def resolve_threads(requested: int, available: int) -> int:
    """Number of workers to use for a requested count given how many are available."""
    if requested < 0:
        raise ValueError(f"thread count must not be negative, got {requested}")
    if requested == ThreadCount.DEFAULT:
        return available
    if requested == ThreadCount.SINGLE:
        return 1
    if requested > available:
        warnings.warn(
            "Invalid number of threads specified. Using Default...",
            RuntimeWarning,
            stacklevel=2,
        )
        return available
    return requested


def buffer_size_mb(num_pixels: int) -> float:
    """Memory in MiB taken by a single-precision buffer of ``num_pixels`` values."""
    return num_pixels * _FLOAT_BYTES / (1024.0 * 1024.0)