[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hearbund"
version = "0.1.0"
description = "A small pygame tile-map game prototype with axis-separated collision."
requires-python = ">=3.10"
keywords = ["game", "pygame", "tilemap", "collision", "sprite-sheet"]
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
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pygame",
]

[project.scripts]
hearbund = "hearbund.game:main"

[tool.hatch.build.targets.wheel]
packages = ["hearbund"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
