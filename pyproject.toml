[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "termreq"
version = "0.1.8"
description = "A terminal client for making HTTP requests, with Vim-style keys"
requires-python = ">=3.10"
keywords = ["http", "client", "terminal", "tui", "vim", "requests"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP",
]
dependencies = [
    "httpx",
    "platformdirs",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
    "respx",
]

[project.scripts]
termreq = "termreq.main:main"

[tool.hatch.build.targets.wheel]
packages = ["termreq"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
