[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gobangserver"
version = "0.1.0"
description = "Account server for a gobang (five-in-a-row) game: user registration over HTTP, backed by SQLite"
requires-python = ">=3.10"
dependencies = []
keywords = ["gobang", "gomoku", "five-in-a-row", "game-server", "sqlite", "http"]
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
    "Topic :: Games/Entertainment :: Board Games",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gobangserver = "gobangserver.server:main"

[tool.hatch.build.targets.wheel]
packages = ["gobangserver"]

[tool.pytest.ini_options]
addopts = "-ra"
