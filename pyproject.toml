[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vecgeom"
version = "0.1.0"
description = "Small 2D and 3D vector geometry toolkit: vectors, matrices, boxes, grids, polygons, splines, quaternions and SVD."
requires-python = ">=3.10"
dependencies = []
keywords = ["geometry", "vector", "matrix", "quaternion", "spline", "polygon", "svd"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["vecgeom"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
