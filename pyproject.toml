[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hslite"
version = "0.1.0"
description = "Game rules for a small two-player card battle game with minions, spells and bosses"
requires-python = ">=3.10"
dependencies = []
keywords = ["card game", "game rules", "minions", "spells", "two-player"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["hslite"]

[tool.pytest.ini_options]
addopts = "-ra"
