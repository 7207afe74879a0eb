[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "catalogo"
version = "0.1.0"
description = "Interactive console catalogue for registering and listing products by category"
requires-python = ">=3.10"
dependencies = []
keywords = ["catalogue", "products", "inventory", "console", "menu"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
catalogo = "catalogo.menu:main"

[tool.hatch.build.targets.wheel]
packages = ["catalogo"]

[tool.pytest.ini_options]
addopts = "-ra"
