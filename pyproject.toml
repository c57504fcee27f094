[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "saba"
version = "0.1.0"
description = "Building blocks of a small toy web browser: HTTP URL parsing, a JavaScript lexer, script values and scopes, colours, layout geometry and computed styles"
requires-python = ">=3.10"
dependencies = []
keywords = ["browser", "javascript", "lexer", "css", "url", "layout"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Browsers",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["saba"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
