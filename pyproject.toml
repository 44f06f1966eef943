[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "essy"
version = "0.1.0"
description = "A two-pass SIC/XE assembler that writes intermediate, symbol table and listing files"
requires-python = ">=3.10"
dependencies = []
keywords = ["sic", "sic/xe", "assembler", "two-pass", "listing", "symbol table"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Assemblers",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
essy = "essy.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["essy"]

[tool.pytest.ini_options]
addopts = "-ra"
