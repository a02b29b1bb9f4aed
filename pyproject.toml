[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "clitasks"
version = "0.1.0"
description = "A small command-line task manager that keeps named task lists as plain text files"
requires-python = ">=3.10"
dependencies = []
keywords = ["tasks", "todo", "cli", "task-manager", "productivity"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ctm = "clitasks.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["clitasks"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
