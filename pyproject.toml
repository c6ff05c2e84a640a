[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "torrest"
version = "0.0.9"
description = "Core pieces of a torrent streaming engine: settings, validation, logging sinks, string helpers and application MIME tables"
requires-python = ">=3.10"
dependencies = []
keywords = ["torrent", "bittorrent", "streaming", "settings", "mime", "logging"]
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
    "Topic :: Communications :: File Sharing",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["torrest"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
