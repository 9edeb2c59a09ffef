[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "forkcons"
version = "0.1.0"
description = "Small process and thread tools: a divisor detector, a generator/detector pipeline and a producer-consumer printer"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "producer-consumer",
    "threads",
    "pipes",
    "subprocess",
    "gcd",
    "linked-list",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
forkcons-nsd = "forkcons.nsd_main:main"
forkcons-forkpipe = "forkcons.forkpipe:main"
forkcons-prodcons = "forkcons.prodcons:main"

[tool.hatch.build.targets.wheel]
packages = ["forkcons"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
