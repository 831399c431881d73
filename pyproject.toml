[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "termtoys"
version = "0.1.0"
description = "Small terminal utilities: character widths, UTF-8 encoding, ASCII art, image display and text helpers"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = [
    "terminal",
    "ansi",
    "wcwidth",
    "utf-8",
    "ascii-art",
    "image-viewer",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Terminals",
    "Topic :: Multimedia :: Graphics :: Viewers",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
termtoys-p26 = "termtoys.sequence:main"
termtoys-imcat = "termtoys.imcat:main"

[tool.hatch.build.targets.wheel]
packages = ["termtoys"]

[tool.hatch.build.targets.sdist]
include = [
    "termtoys",
    "tests",
]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
