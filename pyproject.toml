[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "keyhashsort"
version = "0.1.0"
description = "Load six-digit keys from a file, index them in a chained hash map and radix-sort them."
requires-python = ">=3.10"
dependencies = []
keywords = ["hash map", "chaining", "radix sort", "counting sort", "algorithms"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
keyhashsort = "keyhashsort.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["keyhashsort"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
