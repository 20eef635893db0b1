[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "mysh"
version = "0.1.0"
description = "A small command shell with env, setenv, unsetenv and exit built in"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "command-line", "minishell"]
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
    "Topic :: System :: Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mysh = "mysh.shell:main"

[tool.setuptools.packages.find]
include = ["mysh*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
