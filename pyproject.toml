[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fokus"
version = "0.1.7"
description = "A simple Pomodoro timer for the terminal"
requires-python = ">=3.10"
keywords = ["pomodoro", "timer", "tui", "productivity"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
    "Topic :: Utilities",
]
dependencies = []

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[project.scripts]
fokus = "fokus.tui:main"

[tool.hatch.build.targets.wheel]
packages = ["fokus"]

[tool.pytest.ini_options]
addopts = "-ra"
