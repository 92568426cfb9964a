[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nayukicore"
version = "0.1.0"
description = "Building blocks for game loops: heaps, sparse arrays, delegates, timers, state machines, logging and allocation tracking."
requires-python = ">=3.10"
dependencies = []
keywords = ["game loop", "delegate", "timer", "fsm", "heap", "sparse array", "logging"]
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
    "Topic :: Software Development :: Libraries :: Application Frameworks",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["nayukicore"]

[tool.pytest.ini_options]
addopts = "-ra"
