[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pytoylex"
version = "0.1.0"
description = "A small lexer and pattern-based parser for a Python-like toy language that prints tokens and a syntax tree"
requires-python = ">=3.10"
dependencies = []
keywords = ["lexer", "parser", "tokenizer", "abstract syntax tree", "toy language", "education"]
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
    "Topic :: Software Development :: Compilers",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pytoylex = "pytoylex.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pytoylex"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
