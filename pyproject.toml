[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "clbuilder"
version = "0.1.0"
description = "Build command-line interfaces from positional arguments, keyword arguments, validators and sub-actions, with coloured help output."
requires-python = ">=3.10"
dependencies = []
keywords = ["cli", "command-line", "arguments", "parser", "terminal", "ansi"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
clbuilder-hello = "clbuilder.hello_world:main"

[tool.hatch.build.targets.wheel]
packages = ["clbuilder"]

[tool.hatch.build.targets.sdist]
include = ["clbuilder", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
files = ["clbuilder"]
