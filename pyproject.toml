[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sm4kit"
version = "0.1.0"
description = "SM4 block cipher key schedule and single-block operations, with a throughput benchmark helper"
requires-python = ">=3.10"
dependencies = []
keywords = ["sm4", "block cipher", "cryptography", "benchmark", "throughput"]
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
    "Topic :: Security :: Cryptography",
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sm4kit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
