[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "espdsp"
version = "0.1.0"
description = "Vector arithmetic, fast square roots, FIR and biquad IIR filters for signal processing"
requires-python = ">=3.10"
dependencies = []
keywords = ["dsp", "signal processing", "fir", "iir", "biquad", "filter", "fixed point"]
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
packages = ["espdsp"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
