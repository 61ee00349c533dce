[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "quadsim"
version = "0.1.0"
description = "Pure-Python simulation cores for 2D games: tile platformer physics, particle emitters, Game of Life and Snake"
requires-python = ">=3.10"
dependencies = []
keywords = ["gamedev", "physics", "platformer", "particles", "simulation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["quadsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
