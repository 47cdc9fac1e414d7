[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "recursekit"
version = "0.1.0"
description = "Recursive and backtracking solutions to classic combinatorial problems."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "recursion",
    "backtracking",
    "combinatorics",
    "n-queens",
    "sudoku",
    "subsets",
    "combination-sum",
    "word-search",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Typing :: Typed",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["recursekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
