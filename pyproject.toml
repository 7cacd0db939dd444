[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "roadnet"
version = "0.1.0"
description = "Building blocks for road network data: bit vectors, local ID maps, permutations, binary I/O, OD-pairs, road categories and edge attributes."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "routing",
    "road network",
    "traffic assignment",
    "origin-destination",
    "bit vector",
    "permutation",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: GIS",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[tool.hatch.build.targets.wheel]
packages = ["roadnet"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
