[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hellodemo"
version = "0.1.0"
description = "Sorting algorithms, a ring-buffer deque, graph search and small networking demos"
requires-python = ">=3.10"
keywords = ["sorting", "quicksort", "heapsort", "merge sort", "deque", "bfs", "dfs", "redis", "demo"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]
dependencies = [
    "redis",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
hellodemo = "hellodemo.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["hellodemo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
