[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hexwalls"
version = "0.1.0"
description = "A two-player race-and-wall game on hexagonal boards, with a game server and built-in computer players"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "board game", "hexagonal", "graph", "walls", "pathfinding"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hexwalls = "hexwalls.server:main"

[tool.hatch.build.targets.wheel]
packages = ["hexwalls"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
