[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "sportstracker"
version = "1.0.0"
description = "Terminal tracker for sports activities, statistics, progress charts and goals"
requires-python = ">=3.10"
dependencies = []
keywords = ["sports", "fitness", "tracker", "activities", "goals", "terminal"]
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
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sportstracker = "sportstracker.app:main"

[tool.setuptools.packages.find]
include = ["sportstracker*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
