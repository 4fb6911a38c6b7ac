[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "settingskit"
version = "0.1.0"
description = "Building blocks for application settings: change signals, listeners, equality rules and saving with rotating backups"
requires-python = ">=3.10"
dependencies = []
keywords = ["settings", "configuration", "signals", "listener", "backup"]
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
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["settingskit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
