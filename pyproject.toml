[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xlbase"
version = "0.1.0"
description = "Threading, logging and process utilities: blocking queue, countdown latch, thread pool, atomic integer, stream logger, append-only log files and weak-reference observer and cache helpers."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "threading",
    "logging",
    "thread-pool",
    "blocking-queue",
    "latch",
    "atomic",
    "observer",
]
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
    "Topic :: System :: Logging",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["xlbase"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
