[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "regextok"
version = "0.1.0"
description = "Tokenizer and flat AST builder for a small regular-expression dialect"
requires-python = ">=3.10"
dependencies = []
keywords = ["regex", "tokenizer", "ast", "nfa", "parser"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["regextok"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
