[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fillerbot"
version = "0.1.0"
description = "A Filler game player that places pieces by Manhattan distance, with a small printf-style formatter."
requires-python = ">=3.10"
dependencies = []
keywords = ["filler", "game", "bot", "board-game", "printf", "formatting"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fillerbot = "fillerbot.solver:main"

[tool.hatch.build.targets.wheel]
packages = ["fillerbot"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
