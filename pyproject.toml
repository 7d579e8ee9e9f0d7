[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tinyasm"
version = "0.1.0"
description = "Lexer, parser and interpreter for a tiny 8-bit assembly language"
requires-python = ">=3.10"
dependencies = []
keywords = ["assembly", "interpreter", "emulator", "8-bit", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Interpreters",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tinyasm = "tinyasm.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tinyasm"]

[tool.pytest.ini_options]
addopts = "-ra"
