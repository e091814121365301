[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "trainstation"
version = "0.1.0"
description = "Interactive train station manager: stations, schedules, wagons, tickets and discount cards"
requires-python = ">=3.10"
dependencies = []
keywords = ["train", "railway", "station", "schedule", "tickets", "discount cards"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
trainstation = "trainstation.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["trainstation"]

[tool.pytest.ini_options]
addopts = "-ra"
