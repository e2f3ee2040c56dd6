[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "harddots"
version = "0.1.0"
description = "A personalized dotfile manager for idempotent deployment across Unix-like systems"
requires-python = ">=3.11"
dependencies = [
    "tomli-w",
]
keywords = ["dotfiles", "hardlink", "configuration", "deployment", "git"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Operating System :: MacOS",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Systems Administration",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
harddots = "harddots.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["harddots"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
