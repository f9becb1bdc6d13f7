"""Simulation constants and configuration for the black hole, image and output."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

# Math constants
PI = math.pi
HALF_PI = math.pi / 2.0
DEG_TO_RAD = math.pi / 180.0
RAD_TO_DEG = 180.0 / math.pi

# Black hole defaults
DEFAULT_SPIN = 0.99
DEFAULT_MASS = 1.0
DEFAULT_DISTANCE = 500.0
DEFAULT_OBSERVER_THETA = 85.0 * DEG_TO_RAD
DEFAULT_OBSERVER_PHI = 0.0
DEFAULT_INNER_RADIUS = 5.0
DEFAULT_OUTER_RADIUS = 20.0
DEFAULT_FAR_RADIUS = 600.0

# Image defaults
DEFAULT_ASPECT_WIDTH = 16.0
DEFAULT_ASPECT_HEIGHT = 9.0
DEFAULT_IMAGE_SCALE = 10.0
DEFAULT_CAMERA_SCALE = 2.0

# Integration parameters
ABS_TOLERANCE = 1.0e-8
REL_TOLERANCE = 1.0e-4
MIN_STEP_SIZE = 1.0e-8
MAX_STEP_SIZE = 0.1
INITIAL_STEP_SIZE = 0.1
DISK_TOLERANCE = 0.01
MAX_ITERATIONS = 10000

# Colour map thresholds
RED_THRESHOLD = 0.365079
YELLOW_THRESHOLD = 0.746032

# Output defaults
DEFAULT_OUTPUT_DIR = "data/"
DEFAULT_FILENAME = "cosmic"
DEFAULT_FORMAT = "ppm"


def _horizon_tolerance(mass: float, spin: float) -> float:
    """Radius slightly outside the outer event horizon."""
    discriminant = mass * mass - spin * spin
    if discriminant < 0.0:
        raise ValueError(
            f"spin {spin} exceeds mass {mass}: the black hole has no horizon"
        )
    return 1.01 * (mass + math.sqrt(discriminant))


@dataclass
class BlackHole:
    """Kerr black hole, observer position and accretion disk geometry."""

    spin: float = DEFAULT_SPIN
    mass: float = DEFAULT_MASS
    distance: float = DEFAULT_DISTANCE
    theta: float = DEFAULT_OBSERVER_THETA
    phi: float = DEFAULT_OBSERVER_PHI
    inner_radius: float = DEFAULT_INNER_RADIUS
    outer_radius: float = DEFAULT_OUTER_RADIUS
    far_radius: float = DEFAULT_FAR_RADIUS
    disk_tolerance: float | None = None

    def __post_init__(self) -> None:
        if self.disk_tolerance is None:
            self.disk_tolerance = _horizon_tolerance(self.mass, self.spin)

    @classmethod
    def with_spin(cls, spin: float) -> "BlackHole":
        """Default black hole with the given spin; the horizon assumes unit mass."""
        return cls(spin=spin, disk_tolerance=_horizon_tolerance(1.0, spin))

    def set_observer_angle(self, angle_degrees: float) -> None:
        """Set the observer inclination from an angle in degrees."""
        self.theta = angle_degrees * DEG_TO_RAD


@dataclass
class Image:
    """Image resolution and the camera plane it samples."""

    aspect_width: float = DEFAULT_ASPECT_WIDTH
    aspect_height: float = DEFAULT_ASPECT_HEIGHT
    scale: float = DEFAULT_IMAGE_SCALE
    camera_scale: float = DEFAULT_CAMERA_SCALE
    offset_x: float = field(init=False)
    offset_y: float = field(init=False)
    step_x: float = field(init=False)
    step_y: float = field(init=False)

    def __post_init__(self) -> None:
        self._update_camera()

    def _update_camera(self) -> None:
        width = self.width()
        height = self.height()
        self.offset_x = -self.camera_scale * self.aspect_width * (1.0 - 1.0 / width)
        self.offset_y = self.camera_scale * self.aspect_height
        self.step_x = 2.0 * self.camera_scale * self.aspect_width / width
        self.step_y = 2.0 * self.camera_scale * self.aspect_height / height

    def width(self) -> int:
        return int(self.aspect_width * self.scale)

    def height(self) -> int:
        return int(self.aspect_height * self.scale)

    def num_pixels(self) -> int:
        return self.width() * self.height()

    def aspect_ratio(self) -> float:
        return self.aspect_width / self.aspect_height

    def set_aspect_ratio(self, width: int, height: int) -> None:
        """Change the aspect ratio and recompute the camera plane."""
        self.aspect_width = float(width)
        self.aspect_height = float(height)
        self._update_camera()

    def set_scale(self, scale: float) -> None:
        """Change the resolution scale and recompute the camera plane."""
        self.scale = scale
        self._update_camera()


@dataclass
class OutputConfig:
    """Where and under which name the rendered image is written."""

    output_dir: str = DEFAULT_OUTPUT_DIR
    base_filename: str = DEFAULT_FILENAME
    file_format: str = DEFAULT_FORMAT

    @staticmethod
    def format_float(value: float) -> str:
        """Six-decimal representation with trailing zeros and a bare point removed."""
        text = f"{value:f}".rstrip("0")
        if text.endswith("."):
            text = text[:-1]
        return text

    def set_descriptive_filename(
        self, black_hole: BlackHole, image: Image, prefix: str = "bh"
    ) -> None:
        """Name the output after the simulation parameters."""
        fmt = self.format_float
        self.base_filename = (
            f"{prefix}_spin{fmt(black_hole.spin)}"
            f"_mass{fmt(black_hole.mass)}"
            f"_dist{fmt(black_hole.distance)}"
            f"_theta{fmt(black_hole.theta * RAD_TO_DEG)}"
            f"_phi{fmt(black_hole.phi * RAD_TO_DEG)}"
            f"_{image.width()}x{image.height()}"
        )

    def full_path(self) -> str:
        directory = self.output_dir
        if directory and not directory.endswith("/"):
            directory += "/"
        return f"{directory}{self.base_filename}.{self.file_format}"