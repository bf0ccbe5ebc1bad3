[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "userhex"
version = "0.1.0"
description = "User accounts and login in a ports-and-adapters layout: domain models, application services, a SQLite storage adapter and request handlers."
requires-python = ">=3.10"
dependencies = [
    "bcrypt",
]
keywords = [
    "users",
    "authentication",
    "bcrypt",
    "sqlite",
    "hexagonal-architecture",
    "ports-and-adapters",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database",
    "Topic :: System :: Systems Administration :: Authentication/Directory",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["userhex"]

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
