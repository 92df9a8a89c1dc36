[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "solvebook"
version = "0.1.0"
description = "Worked solutions to classic algorithm and number-theory puzzles, as plain Python functions"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "puzzles",
    "number theory",
    "primes",
    "binary search",
    "sliding window",
    "competitive programming",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
solvebook-euler = "solvebook.euler_cli:main"
solvebook-triangles = "solvebook.contests:triangles_main"
solvebook-dune = "solvebook.contests:dune_main"
solvebook-majority = "solvebook.contests:majority_main"

[tool.hatch.build.targets.wheel]
packages = ["solvebook"]

[tool.pytest.ini_options]
addopts = "-ra"
