[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "crdtdoc"
version = "0.2.1"
description = "Replicated JSON document building blocks with logical clocks: tickets, primitives, counters, arrays and replicated maps."
requires-python = ">=3.10"
dependencies = []
keywords = ["crdt", "collaboration", "json", "logical-clock", "rga", "lamport"]
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
packages = ["crdtdoc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
