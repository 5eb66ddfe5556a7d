[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vendasys"
version = "0.1.0"
description = "Terminal point-of-sale for a by-the-kilo restaurant: register sales and print daily and monthly reports"
requires-python = ">=3.10"
dependencies = []
keywords = ["point-of-sale", "restaurant", "sales", "reports", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Point-Of-Sale",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
vendasys = "vendasys.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["vendasys"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
