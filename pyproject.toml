[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "netcafe"
version = "0.1.0"
description = "Replay a computer club's working day from an event log and report the revenue of each table."
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "event log", "computer club", "revenue", "billing"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
netcafe = "netcafe.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["netcafe"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
