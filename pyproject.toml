[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "runscope"
version = "0.15.0"
description = "Client library for the Runscope API: account, buckets, integrations, remote agents, environments, schedules and test steps."
requires-python = ">=3.10"
dependencies = [
    "requests",
]
keywords = ["runscope", "api", "monitoring", "http", "client"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Internet :: WWW/HTTP",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[tool.hatch.build.targets.wheel]
packages = ["runscope"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
