[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "patternkit"
version = "0.1.0"
description = "Small concurrency and interface patterns: resource pools, worker pools, task runners, feed search and more"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "concurrency",
    "patterns",
    "pool",
    "worker-pool",
    "semaphore",
    "rss",
    "search",
    "threading",
    "wsgi",
]
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
test = ["pytest"]

[project.scripts]
patternkit-wordcount = "patternkit.words:main"
patternkit-copier = "patternkit.copier:main"
patternkit-pool = "patternkit.pool:main"
patternkit-work = "patternkit.work:main"
patternkit-runner = "patternkit.runner:main"
patternkit-search = "patternkit.searchapp:main"
patternkit-serve = "patternkit.handlers:main"
patternkit-metasearch = "patternkit.metasearch:main"
patternkit-semaphore = "patternkit.semaphore:main"

[tool.hatch.build.targets.wheel]
packages = ["patternkit"]

[tool.hatch.build.targets.sdist]
include = ["patternkit", "tests", "README.md", "pyproject.toml"]

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
