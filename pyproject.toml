[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cursus"
version = "0.1.0"
description = "A push_swap stack sorter, a two-command pipeline runner and small string helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["push_swap", "pipex", "sorting", "radix sort", "pipeline", "strings"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
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
push-swap = "cursus.sorting:main"
pipex = "cursus.pipex:main"

[tool.hatch.build.targets.wheel]
packages = ["cursus"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
