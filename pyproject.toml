[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ctrlalt"
version = "0.1.0"
description = "Fixed-point DSP helpers and a simulated board (GPIO, ADC, interrupts) for a small modular-synth utility module"
requires-python = ">=3.10"
dependencies = []
keywords = ["synthesizer", "eurorack", "lfo", "wavetable", "fixed-point", "lookup-table", "simulation"]
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
    "Topic :: Multimedia :: Sound/Audio :: Sound Synthesis",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ctrlalt"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
