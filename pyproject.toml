[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mansion"
version = "0.1.0"
description = "My Mansion: a small pygame game with a circular reveal transition, a main menu and a resolution settings screen"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "pygame", "menu", "scenes", "transition", "letterbox"]
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
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
mansion = "mansion.app:main"

[tool.hatch.build.targets.wheel]
packages = ["mansion"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
