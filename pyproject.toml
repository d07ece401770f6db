[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tilecraft"
version = "0.1.0"
description = "A small tile-based strategy game engine: sprite images, tile worlds and an animated render loop on pygame"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "tiles", "sprites", "strategy", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Real Time Strategy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
tilecraft = "tilecraft.game:main"

[tool.hatch.build.targets.wheel]
packages = ["tilecraft"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
