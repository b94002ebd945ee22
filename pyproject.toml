[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "baots"
version = "0.4.0"
description = "Builders and file generators for TypeScript CLI projects targeting Bun and boune"
requires-python = ">=3.10"
dependencies = []
keywords = ["cli", "codegen", "generator", "typescript", "bun", "boune"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Code Generators",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["baots"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
