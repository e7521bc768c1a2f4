[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dddscaffold"
version = "1.0.0"
description = "Domain-driven design building blocks for users and tenants, plus a scaffolding command-line tool"
requires-python = ">=3.10"
dependencies = []
keywords = ["ddd", "domain-driven-design", "scaffold", "tenant", "aggregate", "domain-events"]
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
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dddscaffold = "dddscaffold.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dddscaffold"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
