[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wgraph"
version = "0.1.0"
description = "Undirected weighted graph with Dijkstra shortest paths"
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "dijkstra", "shortest-path", "weighted-graph"]
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
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
wgraph-demo = "wgraph.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["wgraph"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
