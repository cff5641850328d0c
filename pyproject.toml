[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mambasim"
version = "0.1.0"
description = "Simulation of how players with a 'mamba mentality' shape a five-player basketball team's shot selection and scoring."
requires-python = ">=3.10"
dependencies = []
keywords = ["basketball", "simulation", "monte-carlo", "sports", "model"]
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
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mambasim = "mambasim.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["mambasim"]

[tool.pytest.ini_options]
addopts = "-ra"
