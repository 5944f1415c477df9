[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bitfunc"
version = "0.1.0"
description = "Total functions over 16-bit integers and bit-packed bounded multisets"
requires-python = ">=3.10"
dependencies = []
keywords = ["multiset", "bit-packing", "integer-function", "int16", "serialization"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bitfunc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
