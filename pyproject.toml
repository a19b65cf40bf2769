[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "foxescape"
version = "0.1.0"
description = "A small fullscreen platformer prototype about a fox, built on pygame."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "platformer", "pygame", "side-scroller", "fox"]
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

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
foxescape = "foxescape.game:main"

[tool.hatch.build.targets.wheel]
packages = ["foxescape"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
