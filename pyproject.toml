[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arcomcraft"
version = "0.1.0"
description = "A small block sandbox: a pygame window with a textured cube, plus block registry, inventory, game state and a text menu"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "voxel", "sandbox", "blocks", "pygame", "3d"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
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
arcomcraft = "arcomcraft.app:main"

[tool.hatch.build.targets.wheel]
packages = ["arcomcraft"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
