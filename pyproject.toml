[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "presentfit"
version = "0.1.0"
description = "Decide whether 3x3 present shapes fit into rectangular regions under a tree"
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzle", "packing", "polyomino"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
presentfit = "presentfit.solver:main"

[tool.hatch.build.targets.wheel]
packages = ["presentfit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
