[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pescatocha"
version = "0.1.0"
description = "A small fishing game model: fish species, hooks with catch catalogues, an upgradable rod, and a four-operation calculator."
requires-python = ">=3.10"
dependencies = []
keywords = ["fishing", "game", "simulation", "catalogue", "calculator"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pescatocha = "pescatocha.cli:main"
pescatocha-calc = "pescatocha.calculator:main"

[tool.hatch.build.targets.wheel]
packages = ["pescatocha"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
