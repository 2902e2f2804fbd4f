[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "slovogrid"
version = "0.1.0"
description = "Console word-grid game: add letters to the board and trace dictionary words through them"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "words", "console", "board game", "balda"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Russian",
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
slovogrid = "slovogrid.game:main"

[tool.hatch.build.targets.wheel]
packages = ["slovogrid"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
