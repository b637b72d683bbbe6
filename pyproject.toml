[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algopractice"
version = "0.1.0"
description = "Solutions to classic algorithm problems, with linked-list and binary-tree helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "data structures", "dynamic programming", "graphs", "practice"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
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

[tool.hatch.build.targets.wheel]
packages = ["algopractice"]

[tool.pytest.ini_options]
addopts = "-ra"
