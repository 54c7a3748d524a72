[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arakit"
version = "0.1.0"
description = "Service discovery entries, state machines, state management triggers and diagnostic types for automotive middleware"
requires-python = ">=3.10"
dependencies = []
keywords = ["automotive", "service-discovery", "state-machine", "diagnostics", "uds", "someip"]
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
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["arakit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
