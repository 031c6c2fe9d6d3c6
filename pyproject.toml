[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dinner"
version = "0.1.0"
description = "Dining philosophers table set-up and threaded start-up with argument validation"
requires-python = ">=3.10"
keywords = ["dining-philosophers", "concurrency", "threads", "simulation"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
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
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
philo = "dinner.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dinner"]

[tool.pytest.ini_options]
addopts = "-ra"
