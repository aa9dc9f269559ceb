[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bomberarena"
version = "0.1.0"
description = "A grid bomb game where bots play against each other, with a timed tournament runner"
requires-python = ">=3.10"
dependencies = []
keywords = ["bomberman", "game", "bots", "tournament", "simulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bomberarena = "bomberarena.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bomberarena"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
