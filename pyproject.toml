[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "slosh"
version = "0.1.0"
description = "A small interactive Unix shell with one pipe, output redirection and cd/exit built-ins"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "command-line", "pipes", "redirection", "repl"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
slosh = "slosh.shell:main"

[tool.hatch.build.targets.wheel]
packages = ["slosh"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
