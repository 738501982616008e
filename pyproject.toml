[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "asatools"
version = "0.1.0"
description = "Marble slab cutting, disease spread depth in contact networks, and random instance generators"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "dynamic-programming",
    "graphs",
    "strongly-connected-components",
    "instance-generator",
]
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
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
asa-marble = "asatools.marble:main"
asa-spread = "asatools.spread:main"
asa-gen-tuganet = "asatools.tuganet:main"
asa-gen-ubiquity = "asatools.ubiquity:main"

[tool.hatch.build.targets.wheel]
packages = ["asatools"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
