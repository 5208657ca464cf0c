[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "matrixkit"
version = "0.1.0"
description = "Dense real matrices with arithmetic, determinants, cofactors and inverses"
requires-python = ">=3.10"
dependencies = []
keywords = ["matrix", "linear algebra", "determinant", "inverse", "transpose", "cofactor"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["matrixkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
