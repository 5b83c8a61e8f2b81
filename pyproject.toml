[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "digispec"
version = "0.1.0"
description = "Plain text specification of a digital logic circuit: tokenizer and block structure checker"
requires-python = ">=3.10"
dependencies = []
keywords = ["digital logic", "circuit", "specification", "tokenizer", "parser"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Electronic Design Automation (EDA)",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["digispec"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
