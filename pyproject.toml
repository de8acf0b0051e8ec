[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cardgames"
version = "0.1.0"
description = "Playing cards, decks and a console game of Blackjack"
requires-python = ">=3.10"
dependencies = []
keywords = ["cards", "deck", "blackjack", "card games", "console game"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
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

[project.scripts]
cardgames = "cardgames.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cardgames"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
