[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "dsalgo"
version = "0.1.0"
description = "Classic data structures and algorithms: AVL and binary search trees, heaps, stacks, hash tables and graph searches"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data-structures",
    "algorithms",
    "avl-tree",
    "binary-search-tree",
    "heap",
    "stack",
    "hash-table",
    "graph",
    "dijkstra",
    "bfs",
    "dfs",
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
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dsalgo-heap-sort = "dsalgo.heap:main"
dsalgo-hash = "dsalgo.hashing:main"
dsalgo-dijkstra = "dsalgo.dijkstra:main"
dsalgo-intersection = "dsalgo.intersection:main"
dsalgo-bst = "dsalgo.bst:main"
dsalgo-levels = "dsalgo.levels:main"
dsalgo-list-stack = "dsalgo.stack_lists:main"

[tool.setuptools.packages.find]
include = ["dsalgo*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
