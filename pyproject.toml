[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "toyfront"
version = "0.1.0"
description = "Compiler front end for the Toy language that writes SSA-style IR text, with a companion language detector"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "frontend", "lexer", "parser", "ir", "ssa", "toy-language"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
toyfront = "toyfront.cli:main"
toyfront-detect = "toyfront.detector:main"

[tool.setuptools]
packages = ["toyfront"]

[tool.pytest.ini_options]
addopts = "-ra"
