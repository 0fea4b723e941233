[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "parus"
version = "0.3.0"
description = "Core services of a small game engine: logging, service locator, typed events, input state, INI configs and 3D math"
requires-python = ">=3.10"
dependencies = []
keywords = ["game engine", "events", "input", "configuration", "linear algebra", "service locator"]
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
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["parus"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
