[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "coursekit"
version = "0.1.0"
description = "Classic introductory programming exercises: searching, sorting, lists, trees, N-queens and small object models"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "education",
    "algorithms",
    "sorting",
    "searching",
    "linked-list",
    "stack",
    "binary-search-tree",
    "n-queens",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
coursekit-wifi = "coursekit.wifi:main"

[tool.hatch.build.targets.wheel]
packages = ["coursekit"]

[tool.pytest.ini_options]
addopts = "-ra"
