[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "humania"
version = "0.1.0"
description = "A small side-scrolling arcade game: dodge parrots, crabs, snakes and birds while collecting coins."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "arcade", "side-scroller", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
humania = "humania.game:main"

[tool.hatch.build.targets.wheel]
packages = ["humania"]

[tool.pytest.ini_options]
addopts = "-ra"
