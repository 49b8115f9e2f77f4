[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "extctl"
version = "0.1.0"
description = "Data model for external real-time robot control: statuses, GPIO values, motion states and control signals"
requires-python = ">=3.10"
dependencies = []
keywords = ["robotics", "external control", "motion state", "control signal", "gpio"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Interface Engine/Protocol Translator",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["extctl"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
