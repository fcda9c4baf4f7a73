[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lvlkit"
version = "0.1.0"
description = "Process pipelines, child pipes, a small JSON subset parser and an arithmetic expression evaluator"
requires-python = ">=3.10"
dependencies = []
keywords = ["pipeline", "subprocess", "pipe", "json", "parser", "expression"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
argo = "lvlkit.argo:main"
vbc = "lvlkit.vbc:main"

[tool.hatch.build.targets.wheel]
packages = ["lvlkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
