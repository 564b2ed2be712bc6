[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minicute"
version = "0.1.0"
description = "A small unit-testing toolkit: assertions with readable diffs, named test cases, suites, listeners, comparable ranges and enum stepping helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["testing", "unit-test", "assertions", "suite", "listener", "enum"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Testing :: Unit",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["minicute"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
