[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vvblogger"
version = "0.1.0"
description = "Turn a single markdown note into a static HTML blog post using a page template."
requires-python = ">=3.10"
dependencies = []
keywords = ["blog", "markdown", "static-site", "html", "notes"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Site Management",
    "Topic :: Text Processing :: Markup :: Markdown",
    "Topic :: Text Processing :: Markup :: HTML",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
vvblogger = "vvblogger.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["vvblogger"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
