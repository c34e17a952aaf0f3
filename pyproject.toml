[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "legtraj"
version = "0.1.0"
description = "Constraint sets, a soft-constraint cost and robot parameters for legged-robot trajectory optimization"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "legged robots",
    "trajectory optimization",
    "nonlinear programming",
    "constraints",
    "robotics",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
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
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["legtraj"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
