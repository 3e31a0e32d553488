[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sfaregex"
version = "0.1.0"
description = "A small regular expression engine built on DFAs and simultaneous finite automata for parallel matching"
requires-python = ">=3.10"
dependencies = []
keywords = ["regex", "regular expression", "automaton", "dfa", "nfa", "sfa", "parallel matching"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: General",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sfaregex = "sfaregex.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["sfaregex"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
