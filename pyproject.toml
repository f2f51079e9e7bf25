[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "volsample"
version = "0.1.0"
description = "Uniform sampling from convex bodies, exact volumes and inscribed balls of polytopes"
requires-python = ">=3.10"
keywords = [
    "convex body",
    "polytope",
    "zonotope",
    "simplex",
    "sampling",
    "volume",
    "hit-and-run",
    "linear matrix inequality",
]
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
    "Topic :: Scientific/Engineering :: Mathematics",
]
dependencies = [
    "numpy",
    "scipy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["volsample"]

[tool.pytest.ini_options]
addopts = "-ra"
