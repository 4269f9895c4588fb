[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gravisim"
version = "0.1.0"
description = "Building blocks for a two-dimensional n-body simulation: vectors, bounding boxes, position updates and collision merging"
requires-python = ">=3.10"
dependencies = []
keywords = ["n-body", "gravitation", "simulation", "physics", "collisions"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gravisim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
