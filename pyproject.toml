[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wideint"
version = "0.1.0"
description = "256-bit two's-complement integer arithmetic on plain Python ints: wrapping, overflowing, bit and byte operations"
requires-python = ">=3.10"
dependencies = []
keywords = ["integer", "256-bit", "i256", "u256", "fixed-width", "arithmetic", "two's complement"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["wideint"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
