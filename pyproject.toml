[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tcpbits"
version = "0.1.0"
description = "Building blocks for TCP: wrapping sequence numbers, network byte-order parsing and the Internet checksum"
requires-python = ">=3.10"
dependencies = []
keywords = ["tcp", "sequence numbers", "checksum", "networking", "parser", "hexdump"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["tcpbits"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
