[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "oogabooga"
version = "0.1.8"
description = "Game-framework core utilities: vectors, matrices, a flat hash table, frame input state, simulated heap and arena allocators, and logging."
requires-python = ">=3.10"
dependencies = []
keywords = ["gamedev", "linear-algebra", "vectors", "matrices", "allocator", "input"]
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
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["oogabooga*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
