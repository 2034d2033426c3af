[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "treemenus"
version = "0.1.0"
description = "Interactive console menus backed by self-balancing trees: an AVL user registry and a red-black product inventory"
requires-python = ">=3.10"
dependencies = []
keywords = ["avl", "red-black", "tree", "data-structures", "menu", "console"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
treemenus-avl = "treemenus.avl:main"
treemenus-redblack = "treemenus.redblack:main"

[tool.hatch.build.targets.wheel]
packages = ["treemenus"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
