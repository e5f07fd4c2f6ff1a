[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "practicum"
version = "0.1.0"
description = "Small algorithms and data structures with command-line front ends: fractions, sorting, LIS, queues, stacks, Base64 and more."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "fractions",
    "radix-sort",
    "longest-increasing-subsequence",
    "batcher",
    "priority-queue",
    "stack",
    "linked-list",
    "base64",
    "quadratic-equation",
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

[project.scripts]
lis = "practicum.lis_app:main"
priority-queue = "practicum.pq_app:main"
quadratic = "practicum.quadratic_app:main"
int-stack = "practicum.stack_app:main"

[tool.hatch.build.targets.wheel]
packages = ["practicum"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
