[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kata_solutions"
version = "0.1.0"
description = "Worked solutions to classic coding-interview problems, each with several alternative approaches."
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "interview", "kata", "anagram", "palindrome", "two-sum", "parentheses"]
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
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
kata-solutions = "kata_solutions.cli:main"
kata-group-anagrams = "kata_solutions.group_anagrams:main"

[tool.hatch.build.targets.wheel]
packages = ["kata_solutions"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
