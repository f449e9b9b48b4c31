[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "yenxo"
version = "0.1.0"
description = "A tagged, DOM-like Variant value with checked numeric conversions, JSON input and output, and enum string conversion"
requires-python = ">=3.10"
keywords = ["variant", "serialization", "json", "dom", "conversion", "enum"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["yenxo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
