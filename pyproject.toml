[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "structkit"
version = "0.1.0"
description = "Classic data structures and algorithms: sorting, searching, linked lists, queues, trees and graphs."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data-structures",
    "algorithms",
    "linked-list",
    "queue",
    "binary-search-tree",
    "graph",
    "sorting",
    "searching",
]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["structkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
