[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fzmeta"
version = "0.1.0"
description = "String, path and command-line helpers with small vector and matrix maths, for C table generation tooling"
requires-python = ">=3.10"
dependencies = []
keywords = ["code generation", "command line", "paths", "vectors", "matrices"]
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
    "Topic :: Software Development :: Code Generators",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fzmeta"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
