[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pizzametrics"
version = "0.1.0"
description = "Sales metrics for pizza order CSV files"
requires-python = ">=3.10"
dependencies = []
keywords = ["pizza", "sales", "metrics", "csv", "reporting"]
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
    "Topic :: Office/Business :: Financial",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pizzametrics = "pizzametrics.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pizzametrics"]

[tool.pytest.ini_options]
addopts = "-ra"
