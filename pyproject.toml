[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "meshview"
version = "0.1.0"
description = "Map tile layout, LoRa presets, themes, request tracking and node bookkeeping for a mesh radio device user interface"
requires-python = ">=3.10"
dependencies = []
keywords = ["mesh", "lora", "radio", "map", "tiles", "mercator", "rtttl", "ui"]
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
    "Topic :: Communications :: Ham Radio",
    "Topic :: Scientific/Engineering :: GIS",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["meshview"]

[tool.pytest.ini_options]
addopts = "-ra"
