[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shopcommand"
version = "0.1.0"
description = "Command side of a product catalogue: validated categories and products written to MySQL in transactions"
requires-python = ">=3.11"
keywords = ["cqrs", "command", "catalogue", "mysql", "domain-driven-design", "repository"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database :: Front-Ends",
    "Typing :: Typed",
]
dependencies = [
    "pymysql>=1.1",
]

[project.optional-dependencies]
test = [
    "pytest>=7.4",
]

[tool.hatch.build.targets.wheel]
packages = ["shopcommand"]

[tool.hatch.build.targets.sdist]
include = ["shopcommand", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.11"
warn_unused_ignores = true
warn_redundant_casts = true
