[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "refugio_perros"
version = "0.1.0"
description = "Data structures for a dog shelter: dates, dogs, people, adoptions, vaccination schemes, stacks, queues and sets."
requires-python = ">=3.10"
dependencies = []
keywords = ["data-structures", "binary-search-tree", "priority-queue", "general-tree", "shelter", "adoption"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["refugio_perros"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
