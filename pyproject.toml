[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stoktakip"
version = "0.1.0"
description = "Project-based material stock tracking: entries, issues, stock totals and handover reports kept in plain text files."
requires-python = ">=3.10"
dependencies = []
keywords = ["stock", "inventory", "warehouse", "materials", "handover"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Turkish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
stoktakip = "stoktakip.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["stoktakip"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
