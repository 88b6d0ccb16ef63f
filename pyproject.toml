[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "readyset"
version = "0.1.0"
description = "Readiness interests, events and registrable I/O sources for event-driven networking"
requires-python = ">=3.10"
dependencies = []
keywords = ["readiness", "events", "polling", "non-blocking", "io"]
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
    "Topic :: System :: Networking",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["readyset"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
