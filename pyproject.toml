[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "floxdbg"
version = "0.1.0"
description = "A terminal debugger for inspecting and pausing shell environment activation"
requires-python = ">=3.10"
dependencies = [
    "blessed",
]
keywords = ["debugger", "shell", "tui", "environment", "stack-trace"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Debuggers",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
floxdbg = "floxdbg.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["floxdbg"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
