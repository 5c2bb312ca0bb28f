[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cardconquest"
version = "0.1.0"
description = "Rules engine for a turn-based card conquest game: battles, cards, markets, nations, a map grid and localised texts."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "strategy", "cards", "turn-based", "rules-engine"]
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
    "Topic :: Games/Entertainment :: Turn Based Strategy",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cardconquest"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
