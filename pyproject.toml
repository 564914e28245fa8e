[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "diffurch"
version = "0.1.0"
description = "Supporting utilities for differential equation studies: vector helpers, binary array files, progress display, value formatting and JSON parameters"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "differential equations",
    "numerics",
    "binary arrays",
    "progress bar",
    "parameters",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["diffurch"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
