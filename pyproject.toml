[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algodemo"
version = "0.1.0"
description = "Small algorithm library: searching sorted sequences, Fibonacci, max-finding and a micro-benchmark runner"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "search",
    "binary-search",
    "ternary-search",
    "exponential-search",
    "fibonacci",
    "benchmark",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algodemo-bench = "algodemo.bench:main"

[tool.hatch.build.targets.wheel]
packages = ["algodemo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
