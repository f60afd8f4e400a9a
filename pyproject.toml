[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "answercheck"
version = "0.1.0"
description = "Validators for user answers: required values, length limits counted in graphemes, and interfaces for custom checks."
requires-python = ">=3.10"
dependencies = [
    "regex",
]
keywords = ["validation", "validator", "prompt", "input", "graphemes"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["answercheck"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
