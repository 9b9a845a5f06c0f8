[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jetopt"
version = "0.1.0"
description = "Single-spool turbojet cycle model with a bracketed Newton-Raphson duct-flow solver, posed as an optimisation objective"
requires-python = ">=3.10"
dependencies = []
keywords = ["jet engine", "turbojet", "thermodynamics", "specific impulse", "newton-raphson"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
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

[project.scripts]
jetopt = "jetopt.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["jetopt"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
