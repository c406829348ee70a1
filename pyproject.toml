[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nexusprover"
version = "0.9.7"
description = "Prover node helpers: task caching, system measurements, a Fibonacci program, release checks and dashboard text"
requires-python = ">=3.10"
keywords = ["prover", "node", "task-cache", "fibonacci", "version-check", "benchmark"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Framework :: AsyncIO",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Distributed Computing",
]
dependencies = [
    "psutil",
    "requests",
    "semver",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[project.scripts]
nexusprover-fib = "nexusprover.fib:main"

[tool.hatch.build.targets.wheel]
packages = ["nexusprover"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
