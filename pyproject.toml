[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minic"
version = "1.0.1"
description = "Building blocks of a small C-subset compiler: AST construction, AST graph rendering and ARM32 assembly emission"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "ast", "arm32", "assembly", "register-allocation", "graphviz"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["minic"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
