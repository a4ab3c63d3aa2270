[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ratnum"
version = "1.0.0"
description = "Mutable rational numbers in canonical form, with stream serialization and small arithmetic command-line tools"
requires-python = ">=3.10"
dependencies = []
keywords = ["rational", "fraction", "arithmetic", "checksum", "truth table"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ratnum-demo = "ratnum.demo:main"
ratnum-checksum = "ratnum.checksum:main"
ratnum-grades = "ratnum.grades:main"
ratnum-booleans = "ratnum.booleans:main"
ratnum-fuel = "ratnum.fuel:main"

[tool.hatch.build.targets.wheel]
packages = ["ratnum"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
