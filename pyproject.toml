[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "motorsim"
version = "0.1.0"
description = "Discrete-time simulation of DC motors and a limited PI speed regulator, with PLC-style runtime, byte-order and time helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "dc motor", "pi controller", "plc", "iec 61131-3", "control"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
motorsim = "motorsim.program:main"

[tool.hatch.build.targets.wheel]
packages = ["motorsim"]

[tool.pytest.ini_options]
addopts = "-ra"
