[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jlif"
version = "1.0.0"
description = "JSON line formatter: pretty-print, colorize and filter JSON found in streaming text"
requires-python = ">=3.10"
dependencies = []
keywords = ["json", "logs", "formatter", "filter", "stream", "cli"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Filters",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
jlif = "jlif.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["jlif"]

[tool.pytest.ini_options]
addopts = "-ra"
