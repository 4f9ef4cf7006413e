[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gamelauncher"
version = "0.1.0"
description = "Keep a list of locally installed games, launch them, and check their download pages for new versions."
requires-python = ">=3.10"
keywords = ["games", "launcher", "updates", "version-check", "scraping"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Utilities",
]
dependencies = [
    "requests>=2.28",
    "beautifulsoup4>=4.11",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
    "responses>=0.23",
]

[project.scripts]
gamelauncher = "gamelauncher.cli:main"
gamelauncher-console = "gamelauncher.console:main"
gamelauncher-fix-paths = "gamelauncher.pathfix:main"

[tool.hatch.build.targets.wheel]
packages = ["gamelauncher"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
