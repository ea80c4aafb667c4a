[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wordshift"
version = "0.1.0"
description = "Wordle-style word finder and a backtracking work-shift scheduler"
requires-python = ">=3.10"
dependencies = []
keywords = ["wordle", "dictionary", "scheduling", "backtracking", "puzzle"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
wordshift-wordle = "wordshift.wordle:main"
wordshift-schedwork = "wordshift.schedwork:main"

[tool.hatch.build.targets.wheel]
packages = ["wordshift"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
