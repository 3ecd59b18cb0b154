[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "parcsbarna"
version = "0.1.0"
description = "Load, browse and edit a catalogue of city playground areas and their play objects"
requires-python = ">=3.10"
dependencies = []
keywords = ["playgrounds", "parks", "catalogue", "records", "editor"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database :: Front-Ends",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
parcsbarna = "parcsbarna.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["parcsbarna"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
