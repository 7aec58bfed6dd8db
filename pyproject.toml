[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "katana"
version = "0.1.0"
description = "Display-independent building blocks for two-dimensional games: timing, animation, sprite batching, input state, particles and menu items."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "2d", "animation", "sprites", "input", "particles", "color"]
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
    "Topic :: Software Development :: Libraries :: Application Frameworks",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["katana"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
