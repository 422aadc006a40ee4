[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "labstructs"
version = "0.1.0"
description = "Small linked lists, queues, stacks and a threaded counter demo"
requires-python = ">=3.10"
dependencies = []
keywords = ["linked list", "queue", "stack", "priority queue", "data structures", "threads"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
labstructs-demo = "labstructs.containers:main"
labstructs-threads = "labstructs.counter_threads:main"

[tool.hatch.build.targets.wheel]
packages = ["labstructs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
