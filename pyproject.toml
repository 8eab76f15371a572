[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "scopeview"
version = "3.3.3"
description = "Oscilloscope view model: display settings, cursors, grid geometry, graph history and CSV/JSON sample exporters"
requires-python = ">=3.10"
dependencies = []
keywords = ["oscilloscope", "dso", "cursor", "graticule", "export", "csv", "json", "visualization"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Visualization",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["scopeview"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
