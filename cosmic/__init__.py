"""Kerr black hole metric, render configuration, PPM imaging and Perlin noise."""

__version__ = "0.1.0"
__all__ = ["config", "metric", "perlin", "imaging"]