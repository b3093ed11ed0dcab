[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "contestsolver"
version = "0.1.0"
description = "Solvers for four contest problems: booster races, ordered string reversals, tree selection and alternating trail routes."
requires-python = ">=3.10"
dependencies = []
keywords = ["competitive-programming", "algorithms", "dynamic-programming", "puzzles"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Environment :: Console",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
contestsolver-booster = "contestsolver.booster:main"
contestsolver-reversals = "contestsolver.reversals:main"
contestsolver-treedp = "contestsolver.treedp:main"
contestsolver-trails = "contestsolver.trails:main"

[tool.hatch.build.targets.wheel]
packages = ["contestsolver"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
