[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "apeiron"
version = "0.1.0"
description = "Vectors, parametric curves, explicit functions, polytope categories, file helpers and multi-key sorting."
requires-python = ">=3.10"
dependencies = []
keywords = ["vector", "geometry", "curves", "polytope", "linear algebra", "filesystem"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
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

[tool.hatch.build.targets.wheel]
packages = ["apeiron"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
