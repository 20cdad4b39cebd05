[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "adventtree"
version = "0.1.0"
description = "A red-black tree of ordered items and a list-distance puzzle solver built on it"
requires-python = ">=3.10"
dependencies = []
keywords = ["red-black tree", "balanced tree", "ordered container", "advent of code"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
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
test = ["pytest", "hypothesis"]

[project.scripts]
adventtree = "adventtree.task1:main"

[tool.hatch.build.targets.wheel]
packages = ["adventtree"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
