[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cwr"
version = "0.1.0"
description = "Voxel world data core: packed chunk storage, coordinates, block face vertices, load ordering and biome-based column filling"
requires-python = ">=3.10"
dependencies = []
keywords = ["voxel", "chunk", "terrain", "biome", "game", "simulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Typing :: Typed",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cwr"]

[tool.pytest.ini_options]
addopts = "-ra"
