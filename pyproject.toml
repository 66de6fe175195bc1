[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "taskbench"
version = "0.1.0"
description = "Small self-contained utilities: an infix calculator, Huffman file coding, bit streams, list serialization, a traffic simulation, a JSON table model and spreadsheet format primitives."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "calculator",
    "reverse-polish-notation",
    "huffman",
    "compression",
    "bitstream",
    "serialization",
    "simulation",
    "spreadsheet",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
taskbench-calc = "taskbench.calculator:main"
taskbench-huffman = "taskbench.commander:main"

[tool.hatch.build.targets.wheel]
packages = ["taskbench"]

[tool.pytest.ini_options]
addopts = "-ra"
