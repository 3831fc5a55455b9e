[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "treedot"
version = "0.1.0"
description = "Labelled parse trees, indented text dumps and Graphviz DOT output"
requires-python = ">=3.10"
dependencies = []
keywords = ["parse tree", "syntax tree", "graphviz", "dot", "compiler"]
classifiers = [
    "Development Status :: 4 - Beta",
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
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
treedot = "treedot.dot:main"

[tool.hatch.build.targets.wheel]
packages = ["treedot"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
