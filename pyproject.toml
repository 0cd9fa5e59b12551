[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "bgshell"
version = "0.1.0"
description = "Run a shell on a pseudo-terminal, with terminal colour palettes, soft-key input and SSH proxy configuration helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["terminal", "pty", "shell", "ssh", "proxy", "ansi", "colors"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Terminals :: Terminal Emulators/X Terminals",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bgshell = "bgshell.app:main"

[tool.setuptools.packages.find]
include = ["bgshell*"]

[tool.pytest.ini_options]
addopts = "-ra"
