[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "crstructs"
version = "0.1.0"
description = "Classic data structures: singly linked list, stack, queue, priority queue, hash multimap and binary search tree"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data-structures",
    "linked-list",
    "stack",
    "queue",
    "priority-queue",
    "heap",
    "hashmap",
    "multimap",
    "binary-search-tree",
]
classifiers = [
    "Development Status :: 3 - Alpha",
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
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
crstructs-slist-demo = "crstructs.slist:main"
crstructs-stack-demo = "crstructs.stack:main"
crstructs-queue-demo = "crstructs.fifo:main"
crstructs-hashmap-demo = "crstructs.demo:hashmap_main"
crstructs-bstree-demo = "crstructs.demo:bstree_main"
crstructs-pqueue-demo = "crstructs.demo:pqueue_main"

[tool.hatch.build.targets.wheel]
packages = ["crstructs"]

[tool.hatch.build.targets.sdist]
include = ["crstructs", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
