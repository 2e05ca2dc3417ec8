[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vedit"
version = "0.1.0"
description = "A small vector shape editor that reads and writes simple SVG drawings"
requires-python = ">=3.10"
dependencies = []
keywords = ["svg", "vector", "editor", "drawing", "shapes", "tkinter"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Editors :: Vector-Based",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
vedit = "vedit.app:main"

[tool.hatch.build.targets.wheel]
packages = ["vedit"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
