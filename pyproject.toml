[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "awfmindex"
version = "0.1.0"
description = "FM-index primitives for nucleotide and amino acid sequences: letter encodings, BWT blocks, occurrence vectors and k-mer seed table lookups"
requires-python = ">=3.10"
dependencies = []
keywords = ["fm-index", "bwt", "burrows-wheeler", "bioinformatics", "kmer", "sequence-search"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Bio-Informatics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["awfmindex"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
