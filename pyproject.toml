[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "modemchannel"
version = "0.1.0"
description = "Simulated transmission channels for modem testing: AWGN, transition bit flips, clock-rate offset and multilinear interpolation"
requires-python = ">=3.10"
dependencies = []
keywords = ["modem", "channel", "awgn", "simulation", "interpolation", "timing offset"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications",
    "Topic :: Scientific/Engineering",
    "Topic :: Software Development :: Testing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["modemchannel"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
