[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arcext"
version = "0.1.0"
description = "Combat event records, MumbleLink parsing, mob ids, UI translations and a fixed-capacity ring buffer for game overlay extensions"
requires-python = ">=3.10"
dependencies = []
keywords = ["combat log", "mumblelink", "ring buffer", "translations", "game overlay"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["arcext"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
