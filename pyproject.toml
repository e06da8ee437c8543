[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tetrisgame"
version = "0.1.0"
description = "A falling-block puzzle game with a textured pygame window"
requires-python = ">=3.10"
keywords = ["tetris", "game", "puzzle", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
tetrisgame = "tetrisgame.app:main"

[tool.hatch.build.targets.wheel]
packages = ["tetrisgame"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
