[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "reddsa"
version = "0.1.0"
description = "RedDSA keys, signature encoding and Jubjub/Pallas group arithmetic in pure Python"
requires-python = ">=3.10"
dependencies = []
keywords = ["reddsa", "redjubjub", "redpallas", "jubjub", "pallas", "elliptic-curves", "keys"]
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
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["reddsa"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
