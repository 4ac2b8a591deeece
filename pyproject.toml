[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "leetkit"
version = "0.1.0"
description = "Classic algorithms and data structures: sorting routines, a priority queue, list containers and interview-style problems."
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "data-structures", "sorting", "heap", "priority-queue", "linked-list", "interview"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["leetkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
