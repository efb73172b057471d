[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "storekit"
version = "0.1.0"
description = "Linked lists, a chained hash table, a word-frequency counter and an in-memory warehouse store with shelves and shopping carts"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "linked list",
    "hash table",
    "iterator",
    "word frequency",
    "inventory",
    "shopping cart",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Topic :: Text Processing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
storekit-freq-count = "storekit.freq_count:main"
storekit-guess = "storekit.guess:main"
storekit-catalog = "storekit.catalog:main"

[tool.hatch.build.targets.wheel]
packages = ["storekit"]

[tool.hatch.build.targets.sdist]
include = ["storekit", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
