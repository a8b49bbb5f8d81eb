[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "todoserve"
version = "0.1.0"
description = "A small JSON HTTP service for creating, listing, updating and deleting todo items stored in SQLite."
requires-python = ">=3.10"
keywords = ["todo", "rest", "json", "http", "flask", "sqlite"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Web Environment",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Dynamic Content",
]
dependencies = [
    "flask",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
todoserve = "todoserve.application:main"

[tool.hatch.build.targets.wheel]
packages = ["todoserve"]

[tool.pytest.ini_options]
addopts = "-ra"
