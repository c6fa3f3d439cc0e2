[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "termsheet"
version = "2.8.4"
description = "Spreadsheet building blocks: cell references, viewport arithmetic, number and date formatting, colours and a library of formula functions"
requires-python = ">=3.10"
dependencies = []
keywords = ["spreadsheet", "formula", "cell", "terminal", "formatting"]
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
    "Topic :: Office/Business :: Financial :: Spreadsheet",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["termsheet"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
