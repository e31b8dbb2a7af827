[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "momosaic"
version = "0.0.1"
description = "Photo mosaic engine: tile layout, interaction badness from a Lennard-Jones potential, and a stepwise evolution"
requires-python = ">=3.10"
keywords = ["mosaic", "photo mosaic", "image", "lennard-jones", "gaussian blur"]
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
    "Topic :: Multimedia :: Graphics",
]
dependencies = [
    "numpy",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
momosaic = "momosaic.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["momosaic"]

[tool.pytest.ini_options]
addopts = "-ra"
