[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "blockfall"
version = "0.1.0"
description = "Falling-block puzzle game logic: board, piece bag, wall kicks, ghost piece and frame loop"
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzle", "game", "falling blocks", "tetromino", "wall kick"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["blockfall"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
