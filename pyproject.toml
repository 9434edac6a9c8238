[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "bspgraph"
version = "0.1.0"
description = "Bulk-synchronous BFS, shortest paths and connected components over CSR graphs"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "graph",
    "bfs",
    "sssp",
    "shortest-paths",
    "connected-components",
    "bsp",
    "csr",
    "frontier",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
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
bspgraph = "bspgraph.cli:main"

[tool.setuptools.packages.find]
include = ["bspgraph*"]

[tool.pytest.ini_options]
addopts = "-ra"
