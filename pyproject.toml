[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "batcave"
version = "0.1.0"
description = "A small top-down shooter engine: tile-based levels, collision, parallax background, HUD, player and bat enemies"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "engine", "tilemap", "collision", "arcade", "shooter", "fixed-point"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
batcave = "batcave.game:main"

[tool.hatch.build.targets.wheel]
packages = ["batcave"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
