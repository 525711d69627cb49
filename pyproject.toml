[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "goldwatch"
version = "1.0.1"
description = "Track live gold prices and keep a record of your gold holdings in SQLite"
requires-python = ">=3.10"
dependencies = [
    "requests",
    "pillow",
]
keywords = ["gold", "bullion", "prices", "portfolio", "holdings", "sqlite"]
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
    "Topic :: Office/Business :: Financial :: Investment",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[project.scripts]
goldwatch = "goldwatch.app:main"

[tool.hatch.build.targets.wheel]
packages = ["goldwatch"]

[tool.pytest.ini_options]
addopts = "-ra"
