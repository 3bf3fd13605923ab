[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nostrkit"
version = "0.1.0"
description = "Core nostr protocol types: keys, Schnorr signatures, bech32 identifiers, URLs and relay documents"
requires-python = ">=3.10"
dependencies = []
keywords = ["nostr", "bech32", "schnorr", "secp256k1", "bip-340", "relay", "nip-19", "nip-11"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["nostrkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
