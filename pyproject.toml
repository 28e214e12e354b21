[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rpp"
version = "0.1.0"
description = "Small toolkit: squirrel5 hashing, a hash-driven RNG, containers, reference counting, sync primitives, eager tasks, file and UDP helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["containers", "hashing", "rng", "robin-hood", "heap", "coroutines", "udp"]
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
packages = ["rpp"]

[tool.pytest.ini_options]
addopts = "-ra"
