[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sclib"
version = "2.0.0"
description = "Small building blocks: CRC-32C, a min-heap, an INI parser, a doubly linked list and a growable array"
requires-python = ">=3.10"
dependencies = []
keywords = ["crc32c", "checksum", "heap", "priority-queue", "ini", "linked-list", "array"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sclib"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
