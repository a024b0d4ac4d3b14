[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jjjengine"
version = "0.1.0"
description = "A small 2D game engine with a shooting play scene and a line-drawing edit scene"
requires-python = ">=3.10"
keywords = ["game", "engine", "2d", "pygame", "arcade"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: Developers",
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
jjjengine = "jjjengine.app:main"

[tool.hatch.build.targets.wheel]
packages = ["jjjengine"]

[tool.pytest.ini_options]
addopts = "-ra"
