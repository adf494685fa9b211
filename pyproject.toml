[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wifiphy"
version = "0.1.0"
description = "IEEE 802.11 PHY timing model: transmission modes, data rates, preamble, header and payload airtime"
requires-python = ">=3.10"
dependencies = []
keywords = ["wifi", "802.11", "phy", "airtime", "mcs", "wireless"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Telecommunications Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["wifiphy"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
