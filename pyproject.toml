[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "unitkit"
version = "0.1.0"
description = "A minimal unit-test runner with a small C-style string, memory, conversion and printf toolkit"
requires-python = ">=3.10"
dependencies = []
keywords = ["unit testing", "test runner", "strings", "printf", "toolkit"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Testing :: Unit",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
unitkit = "unitkit.suites:main"

[tool.hatch.build.targets.wheel]
packages = ["unitkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
