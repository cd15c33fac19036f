[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cloudidw"
version = "0.1.0"
description = "Inverse distance weighting of random 3D point clouds onto a regular cubic grid, with k-d tree neighbour search."
requires-python = ">=3.10"
dependencies = []
keywords = ["interpolation", "idw", "point cloud", "kd-tree", "grid", "nearest neighbour"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cloudidw = "cloudidw.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cloudidw"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
