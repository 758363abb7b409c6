[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "npcbattle"
version = "0.1.0"
description = "A small NPC battle simulation: elves, outlaws and squirrels fight on a field, in rounds or live."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "simulation", "npc", "visitor", "observer"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
npcbattle-classic = "npcbattle.classic_game:main"
npcbattle-live = "npcbattle.live_game:main"

[tool.hatch.build.targets.wheel]
packages = ["npcbattle"]

[tool.pytest.ini_options]
addopts = "-ra"
