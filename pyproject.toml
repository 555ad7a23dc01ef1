[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ghostfrag"
version = "0.0.1"
description = "Molecular fragmentation helpers: covalent-radius connectivity, broken bonds, nuclear graphs and distance screening"
requires-python = ">=3.10"
dependencies = []
keywords = ["chemistry", "fragmentation", "connectivity", "covalent radius", "molecular graph", "n-mer screening"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Chemistry",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ghostfrag"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
