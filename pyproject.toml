[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chartforge"
version = "0.1.0"
description = "Chart building with automatic axis scaling, rendered to SVG"
requires-python = ">=3.10"
dependencies = []
keywords = ["chart", "plot", "svg", "histogram", "box plot", "visualization"]
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
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Visualization",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["chartforge"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
