[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dmrgw"
version = "0.1.0"
description = "Building blocks for a DMR gateway: frame sync, call rewrite rules, timers, ring buffers, hashing and UDP networking"
requires-python = ">=3.10"
dependencies = []
keywords = ["dmr", "ham radio", "amateur radio", "gateway", "talkgroup", "udp"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Telecommunications Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Ham Radio",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dmrgw"]

[tool.pytest.ini_options]
addopts = "-ra"
