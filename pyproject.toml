[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cstrkit"
version = "0.1.0"
description = "C string and memory routines, printf-style formatting and scanf-style parsing with C semantics"
requires-python = ">=3.10"
dependencies = []
keywords = ["string", "memory", "sprintf", "sscanf", "strtok", "printf", "scanf"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Topic :: Text Processing :: General",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cstrkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
