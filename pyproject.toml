[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cursorkit"
version = "0.1.0"
description = "A cursor list and ordered tree dictionaries (plain and red-black) with built-in cursors"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "list",
    "cursor",
    "binary search tree",
    "red-black tree",
    "ordered dictionary",
    "data structures",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
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
packages = ["cursorkit"]

[tool.hatch.build.targets.sdist]
include = ["cursorkit", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
files = ["cursorkit"]
