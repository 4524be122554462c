[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "multiarchtuning"
version = "1.1.1"
description = "API types, status conditions, validation and version conversion for architecture-aware pod placement configuration."
requires-python = ">=3.10"
dependencies = []
keywords = ["kubernetes", "multiarch", "pod-placement", "conditions", "validation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Clustering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["multiarchtuning"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
