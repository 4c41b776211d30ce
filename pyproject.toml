[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "snakeboard"
version = "0.1.0"
description = "Text-board snake game engine with a terminal player, plus small string and vector utilities"
requires-python = ">=3.10"
dependencies = []
keywords = ["snake", "game", "terminal", "board", "simulation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
snake = "snakeboard.cli:main"
interactive-snake = "snakeboard.interactive:main"
bork = "snakeboard.bork:main"

[tool.hatch.build.targets.wheel]
packages = ["snakeboard"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
