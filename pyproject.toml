[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hanawire"
version = "0.1.0"
description = "BSON codec and client-connection helpers for a MongoDB wire protocol compatibility layer"
requires-python = ">=3.10"
dependencies = []
keywords = ["bson", "mongodb", "wire-protocol", "database", "serialization"]
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
    "Topic :: Database",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["hanawire"]

[tool.pytest.ini_options]
addopts = "-ra"
