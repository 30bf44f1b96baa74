[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lrucaches"
version = "0.1.0"
description = "Segmented LRU and 2Q caches with explicit put results and inspectable segments"
requires-python = ">=3.10"
dependencies = []
keywords = ["cache", "lru", "2q", "segmented-lru", "slru", "eviction"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["lrucaches"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
