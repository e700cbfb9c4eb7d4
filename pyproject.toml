[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "logicroissant"
version = "0.1.0"
description = "Terminal puzzle game: collect truth-table values in order while dodging ghosts"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "terminal", "logic", "truth-table", "puzzle", "ansi"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
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
logicroissant = "logicroissant.game:main"

[tool.hatch.build.targets.wheel]
packages = ["logicroissant"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
