[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "astronomy"
version = "0.1.4"
description = "Astronomical calculations: exact GPS time values and physical quantities with units"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["astronomy", "units", "quantities", "dimensions", "gps time", "physics"]
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
    "Topic :: Scientific/Engineering :: Astronomy",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
astronomy = "astronomy.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["astronomy"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
