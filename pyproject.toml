[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "practicekit"
version = "0.1.0"
description = "Small programming exercises: a dungeon crawler, a string class, an integer stack, grade and number puzzles."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "education",
    "exercises",
    "practice",
    "games",
    "dungeon",
    "puzzles",
]
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
    "Topic :: Education",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
practicekit-dungeon = "practicekit.dungeon_game:main"
practicekit-debug-menu = "practicekit.debug_menu:main"
practicekit-rover = "practicekit.rover:main"
practicekit-stack = "practicekit.int_stack:main"
practicekit-parks = "practicekit.state_parks:main"
practicekit-grades = "practicekit.grades:main"
practicekit-mountains = "practicekit.mountains:main"
practicekit-linked-list = "practicekit.linked_list:main"
practicekit-resistor = "practicekit.resistor:main"
practicekit-text = "practicekit.text_tools:main"
practicekit-guess = "practicekit.guessing:main"
practicekit-small = "practicekit.small_programs:main"

[tool.setuptools.packages.find]
include = ["practicekit*"]

[tool.pytest.ini_options]
addopts = "-ra"
