[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "amber_engine"
version = "0.1.0"
description = "Core pieces of a small game engine: vector, matrix and quaternion maths, a typed data hierarchy, configuration, asset storage and input state tracking."
requires-python = ">=3.10"
dependencies = []
keywords = ["game engine", "vector", "matrix", "quaternion", "input", "assets"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["amber_engine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
