[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vnn"
version = "0.1.0"
description = "A small fully connected neural network trained on MNIST-style IDX data"
requires-python = ">=3.10"
keywords = ["neural network", "mnist", "backpropagation", "idx", "numpy"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]
dependencies = [
    "numpy",
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
vnn = "vnn.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["vnn"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
