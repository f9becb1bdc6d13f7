[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cosmic"
version = "0.1.0"
description = "Kerr black hole metric, accretion disk image configuration, hot-colormap PPM output and Perlin noise"
requires-python = ">=3.10"
dependencies = []
keywords = ["black hole", "kerr", "boyer-lindquist", "general relativity", "geodesic", "perlin noise", "ppm"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Astronomy",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cosmic"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
