[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "leetsolutions"
version = "0.1.0"
description = "Algorithm puzzle solutions: dynamic programming, graphs, disjoint sets, combinatorics and text puzzles"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "dynamic-programming",
    "graphs",
    "union-find",
    "combinatorics",
    "interview",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
leetsolutions = "leetsolutions.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["leetsolutions"]

[tool.hatch.build.targets.sdist]
include = ["leetsolutions", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
