[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rubikcube"
version = "0.1.0"
description = "A Rubik's cube model that parses move sequences in standard notation and applies them to a cube."
requires-python = ">=3.10"
dependencies = []
keywords = ["rubik", "cube", "puzzle", "notation", "scramble"]
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
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rubik = "rubikcube.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["rubikcube"]

[tool.pytest.ini_options]
addopts = "-ra"
