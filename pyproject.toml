[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "shelfkeeper"
version = "1.0.0"
description = "A small console library manager for books and periodicals kept in a tab-separated data file."
requires-python = ">=3.10"
dependencies = []
keywords = ["library", "books", "periodicals", "loans", "console"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
shelfkeeper = "shelfkeeper.app:main"

[tool.setuptools.packages.find]
include = ["shelfkeeper*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
