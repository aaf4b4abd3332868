[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "apcalc"
version = "1.0.0"
description = "Arbitrary-precision integer calculator that works digit by digit"
requires-python = ">=3.10"
dependencies = []
keywords = ["calculator", "arbitrary precision", "big integer", "arithmetic", "command line"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
apcalc = "apcalc.cli:main"

[tool.setuptools.packages.find]
include = ["apcalc*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
