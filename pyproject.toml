[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "otrio"
version = "0.1.0"
description = "A terminal game of Otrio for four players on a 3x3 board of nested rings"
requires-python = ">=3.10"
dependencies = []
keywords = ["otrio", "board game", "terminal", "game"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
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
otrio = "otrio.game:main"

[tool.hatch.build.targets.wheel]
packages = ["otrio"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
