[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "catenakit"
version = "0.1.0"
description = "Host-side building blocks for LoRaWAN sensor node firmware: polling, logging, dates, timers, LED patterns, line editing and FRAM field codecs."
requires-python = ">=3.10"
dependencies = []
keywords = ["embedded", "lorawan", "fram", "polling", "sensor", "timer", "sflt24"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["catenakit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
