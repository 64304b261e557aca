[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "greenwave"
version = "0.1.0"
description = "Find and optimise green waves along a corridor of signalised junctions"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "traffic",
    "traffic-lights",
    "green-wave",
    "signal-timing",
    "offset-optimisation",
    "genetic-algorithm",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
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
test = ["pytest"]

[project.scripts]
greenwave = "greenwave.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["greenwave"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
