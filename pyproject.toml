[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "treemapkit"
version = "0.1.0"
description = "An ordered map on an unbalanced binary search tree with a caller-supplied ordering, plus a demo and a scored self-check."
requires-python = ">=3.10"
dependencies = []
keywords = ["treemap", "binary search tree", "ordered map", "upper bound", "data structures"]
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
treemapkit-demo = "treemapkit.cli:main"
treemapkit-grade = "treemapkit.grading:main"

[tool.hatch.build.targets.wheel]
packages = ["treemapkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
