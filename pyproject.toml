[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cashcarry"
version = "0.1.0"
description = "A small cash-and-carry store system: inventory, customers, staff, carts and sales reports at the terminal."
requires-python = ">=3.10"
dependencies = []
keywords = ["point-of-sale", "inventory", "store", "orders", "console"]
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
    "Topic :: Office/Business :: Financial :: Point-Of-Sale",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cashcarry = "cashcarry.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cashcarry"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
