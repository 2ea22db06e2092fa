[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rmtool"
version = "0.1.0"
description = "Remove files and directories from the command line, with prompts and root protection"
requires-python = ">=3.10"
dependencies = []
keywords = ["rm", "remove", "delete", "files", "directories", "cli"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Filesystems",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rmtool = "rmtool.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["rmtool"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
