[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dailycode"
version = "0.1.0"
description = "Answers to short programming-contest exercises, as plain Python functions and a command-line solver"
requires-python = ">=3.10"
dependencies = []
keywords = ["competitive-programming", "exercises", "puzzles", "practice"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dailycode = "dailycode.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dailycode"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
