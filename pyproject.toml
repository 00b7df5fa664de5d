[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "commodoro"
version = "0.1.0"
description = "Pomodoro timer building blocks: a phase state machine, settings storage, synthesised chimes, idle detection and a rendered status icon"
requires-python = ">=3.10"
keywords = ["pomodoro", "timer", "productivity", "breaks", "focus"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["commodoro"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
