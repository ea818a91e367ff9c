[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tankmaze"
version = "0.1.0"
description = "Two-player tank battle in a randomly generated maze"
requires-python = ">=3.10"
keywords = ["game", "tank", "maze", "pygame", "arcade", "two-player"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
tankmaze = "tankmaze.game:main"

[tool.hatch.build.targets.wheel]
packages = ["tankmaze"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
