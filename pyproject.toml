[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "should"
version = "0.1.0"
description = "Composable assertion functions and an xUnit-style fixture runner for tests."
requires-python = ">=3.10"
dependencies = []
keywords = ["testing", "assertions", "xunit", "fixtures", "unit-tests"]
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
    "Topic :: Software Development :: Testing :: Unit",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["should"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
