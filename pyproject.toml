[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "eightball"
version = "0.1.0"
description = "A two-player eight-ball pool game with a small 2D physics engine"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["pool", "billiards", "eight-ball", "game", "physics", "pygame"]
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
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
eightball = "eightball.game:main"

[tool.hatch.build.targets.wheel]
packages = ["eightball"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
