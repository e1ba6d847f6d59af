[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "blogstore"
version = "0.1.0"
description = "A small SQLite-backed store for articles and their comments"
requires-python = ">=3.10"
dependencies = []
keywords = ["sqlite", "blog", "articles", "comments", "database"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Database :: Front-Ends",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
blogstore = "blogstore.cli:main"

[tool.setuptools.packages.find]
include = ["blogstore*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
