[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "atmoscli"
version = "0.1.0"
description = "Stack and component configuration helpers: argument parsing, deep merging, variable source tracing and YAML/JSON output"
requires-python = ">=3.10"
keywords = ["terraform", "helmfile", "stacks", "configuration", "yaml", "infrastructure"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: System Administrators",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Systems Administration",
]
dependencies = [
    "pyyaml",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["atmoscli"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
