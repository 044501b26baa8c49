[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "partstore"
version = "0.1.0"
description = "Inventory, sales and customer tracking for a small auto parts shop, driven from an interactive menu"
requires-python = ">=3.10"
dependencies = []
keywords = ["inventory", "point-of-sale", "auto parts", "sales", "customers"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Point-Of-Sale",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
partstore = "partstore.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["partstore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
