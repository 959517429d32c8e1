[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zollstock"
version = "0.3.0"
description = "Physical quantities with units and dimensions, checked and converted at runtime"
requires-python = ">=3.10"
dependencies = []
keywords = ["units", "quantities", "dimensions", "SI", "physics", "measurement"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pcalc = "zollstock.pcalc:main"

[tool.hatch.build.targets.wheel]
packages = ["zollstock"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
