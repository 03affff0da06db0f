[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "housebuy"
version = "0.1.0"
description = "Simulate your bank balance while paying off a house with SAC or PRICE amortization"
requires-python = ">=3.10"
keywords = ["mortgage", "amortization", "sac", "price", "finance", "simulation"]
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
    "Topic :: Office/Business :: Financial",
]
dependencies = [
    "matplotlib",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
housebuy = "housebuy.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["housebuy"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
