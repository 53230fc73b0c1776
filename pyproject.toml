[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "macrokata"
version = "0.1.0"
description = "A runner for macro-writing exercises that builds, expands, diffs and checks them, with Python katas for each exercise."
requires-python = ">=3.10"
dependencies = []
keywords = ["macros", "exercises", "kata", "education", "diff", "cargo"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
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
macrokata = "macrokata.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["macrokata"]

[tool.pytest.ini_options]
addopts = "-ra"
