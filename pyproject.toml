[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fontcraft"
version = "0.14.2"
description = "Font handles, glyph canvases, hinting options, family names and 2D geometry for working with fonts"
requires-python = ">=3.10"
dependencies = []
keywords = ["font", "fonts", "glyph", "canvas", "bitmap", "hinting", "font-family"]
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
    "Topic :: Text Processing :: Fonts",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fontcraft"]

[tool.hatch.build.targets.sdist]
include = ["fontcraft", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
