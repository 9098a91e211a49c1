[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hexapawn"
version = "0.1.0"
description = "Play Hexapawn in the terminal against a minimax computer opponent, with or without alpha-beta pruning"
requires-python = ">=3.10"
dependencies = []
keywords = ["hexapawn", "game", "minimax", "alpha-beta", "board game"]
classifiers = [
    "Development Status :: 4 - Beta",
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
hexapawn = "hexapawn.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["hexapawn"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
