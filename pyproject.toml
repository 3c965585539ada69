[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wordsched"
version = "0.1.0"
description = "Backtracking solvers for Wordle-style word search and daily work-shift scheduling"
requires-python = ">=3.10"
dependencies = []
keywords = ["wordle", "puzzle", "backtracking", "scheduling", "search"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
wordsched-wordle = "wordsched.wordle:main"
wordsched-schedwork = "wordsched.schedwork:main"

[tool.hatch.build.targets.wheel]
packages = ["wordsched"]

[tool.hatch.build.targets.sdist]
include = ["wordsched", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
