[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "coursekit"
version = "0.1.0"
description = "Course catalog toolkit: event dispatching, SQLite-backed stores, resolvers, a category service, unit of work and a small CLI"
requires-python = ">=3.10"
dependencies = []
keywords = ["courses", "catalog", "events", "sqlite", "unit-of-work", "repository"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
    "Topic :: Database",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
coursekit = "coursekit.cli:main"
coursekit-product = "coursekit.product:main"

[tool.setuptools]
packages = ["coursekit"]

[tool.pytest.ini_options]
addopts = "-ra"
