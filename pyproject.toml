[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arcwlint"
version = "0.1.0"
description = "Building blocks for linting Markdown proposal documents: preamble parsing, diagnostic snippets, reporters and syntax-tree visitors"
requires-python = ">=3.10"
dependencies = []
keywords = ["markdown", "lint", "preamble", "front-matter", "diagnostics"]
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
    "Topic :: Text Processing :: Markup :: Markdown",
    "Topic :: Software Development :: Quality Assurance",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["arcwlint"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
