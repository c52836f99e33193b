[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wordscope"
version = "0.1.0"
description = "Interactive word-frequency, longest-word and sentence-count analysis of UTF-8 text files"
requires-python = ">=3.10"
dependencies = []
keywords = ["text analysis", "word frequency", "linguistics", "sentences", "corpus"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Russian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Linguistic",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
wordscope = "wordscope.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["wordscope"]

[tool.pytest.ini_options]
addopts = "-ra"
