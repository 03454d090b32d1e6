[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aesmodes"
version = "0.1.0"
description = "AES-128 with ECB and CBC modes, bit padding, and Monte Carlo and multi-block message tests"
requires-python = ">=3.10"
dependencies = []
keywords = ["aes", "ecb", "cbc", "block cipher", "monte carlo test", "padding"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
aesmodes-mct = "aesmodes.mct:main"
aesmodes-modes = "aesmodes.modes:main"

[tool.hatch.build.targets.wheel]
packages = ["aesmodes"]

[tool.pytest.ini_options]
addopts = "-ra"
