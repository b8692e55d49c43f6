[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cloudlist"
version = "0.0.1"
description = "List the apps, services and containers of a targeted Cloud Foundry space, with a small plugin toolkit and example plugins"
requires-python = ">=3.10"
dependencies = [
    "requests",
]
keywords = ["cloud foundry", "cli", "plugin", "containers", "i18n"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[project.scripts]
cloudlist = "cloudlist.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cloudlist"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
