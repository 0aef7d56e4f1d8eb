[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lyricindex"
version = "0.1.0"
description = "Build and print an inverted index of the words in a folder of text files"
requires-python = ">=3.10"
dependencies = []
keywords = ["inverted index", "search", "text", "indexing", "term frequency"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Indexing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
lyricindex = "lyricindex.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["lyricindex"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
