[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "aideck"
version = "0.1.0"
description = "Grayscale PPM I/O and simple image kernels for a small camera deck"
requires-python = ">=3.10"
dependencies = []
keywords = ["ppm", "pgm", "image-processing", "demosaicking", "bayer", "threshold"]
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
    "Topic :: Scientific/Engineering :: Image Processing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
aideck-manipulate = "aideck.manipulations:main"

[tool.setuptools.packages.find]
include = ["aideck*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
