[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pjtools"
version = "0.1.0"
description = "Byte and hex helpers, uptime formatting, callbacks, a bounded queue, a mutex, a background worker and LED blink patterns"
requires-python = ">=3.10"
dependencies = []
keywords = ["embedded", "callbacks", "queue", "mutex", "hex", "led", "worker"]
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
    "Topic :: Software Development :: Embedded Systems",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pjtools"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
