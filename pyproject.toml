[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ev3finder"
version = "0.1.0"
description = "Geometry, destination loading, a small HTTP server and TCP messaging for an EV3 path-finding robot"
requires-python = ">=3.10"
dependencies = [
    "pyyaml",
]
keywords = ["ev3", "robot", "geometry", "vector", "http", "tcp", "navigation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["ev3finder"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
