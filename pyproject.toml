[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "clinicsim"
version = "0.1.0"
description = "Discrete time-step simulation of a physiotherapy clinic's patients, waiting lists and treatment resources"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "scheduling", "clinic", "physiotherapy", "queues"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Medical Science Apps.",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
clinicsim = "clinicsim.ui:main"

[tool.hatch.build.targets.wheel]
packages = ["clinicsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
