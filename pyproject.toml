[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sudokustep"
version = "0.1.0"
description = "Interactive sudoku editor with a step-by-step backtracking solver you can watch"
requires-python = ">=3.10"
keywords = ["sudoku", "solver", "backtracking", "puzzle", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
sudokustep = "sudokustep.app:main"

[tool.hatch.build.targets.wheel]
packages = ["sudokustep"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
