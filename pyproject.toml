[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pyrosim"
version = "0.1.0"
description = "Building blocks for a particle simulation: vectors, ID-stable containers, easing, rolling statistics, a thread pool and render layers"
requires-python = ">=3.10"
keywords = ["simulation", "particles", "easing", "interpolation", "thread-pool", "geometry", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["pyrosim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
