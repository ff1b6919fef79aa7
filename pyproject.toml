[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tinkerbench"
version = "0.1.0"
description = "A small workbench of tinkering projects: a text-mode roguelike core, a fixed-column to CSV converter and a sleeping-threads exercise"
requires-python = ">=3.10"
dependencies = []
keywords = ["roguelike", "field-of-view", "dungeon", "csv", "threads"]
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
    "Topic :: Games/Entertainment :: Role-Playing",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tinkerbench-rogue = "tinkerbench.game:main"
tinkerbench-tocsv = "tinkerbench.tocsv:main"
tinkerbench-sleepers = "tinkerbench.sleepers:main"

[tool.hatch.build.targets.wheel]
packages = ["tinkerbench"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
