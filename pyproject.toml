[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vedit"
version = "0.0.1"
description = "A small modal terminal text editor with vi-style navigation and a command prompt"
requires-python = ">=3.10"
dependencies = []
keywords = ["editor", "terminal", "vi", "modal", "text"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Editors",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
vedit = "vedit.term:main"

[tool.hatch.build.targets.wheel]
packages = ["vedit"]

[tool.pytest.ini_options]
addopts = "-ra"
