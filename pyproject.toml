[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "labkit"
version = "0.1.0"
description = "Graph traversals, sorting algorithms and a simple TCP file transfer server and client"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "graphs",
    "bfs",
    "dfs",
    "dijkstra",
    "prim",
    "sorting",
    "tcp",
    "file-transfer",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
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
labkit-graph = "labkit.graphs:main"
labkit-sort = "labkit.sorting:main"
labkit-serve = "labkit.fileserver:main"
labkit-fetch = "labkit.fileclient:main"

[tool.hatch.build.targets.wheel]
packages = ["labkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
