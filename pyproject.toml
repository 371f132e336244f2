[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "qdsp"
version = "0.1.0"
description = "Audio DSP building blocks: fast math approximations and bitstream autocorrelation"
requires-python = ">=3.10"
dependencies = []
keywords = ["audio", "dsp", "fast-math", "approximation", "autocorrelation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Sound/Audio",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["qdsp"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
