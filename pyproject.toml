[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "swipekit"
version = "0.1.0"
description = "Utilities for swipe-keyboard input: swipe geometry, timers, averages, statistics, text buffers, binary files, locks and queues."
requires-python = ">=3.10"
dependencies = []
keywords = ["swipe", "keyboard", "timer", "statistics", "average", "queue", "utilities"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["swipekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
