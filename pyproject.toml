[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kittysearch"
version = "0.1.0"
description = "Fast incremental scrollback search overlay for the Kitty terminal"
requires-python = ">=3.10"
dependencies = [
    "blessed",
]
keywords = ["kitty", "terminal", "search", "scrollback", "regex"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Terminals :: Terminal Emulators/X Terminals",
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[project.scripts]
kittysearch = "kittysearch.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["kittysearch"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
