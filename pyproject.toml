[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cocompute"
version = "0.7.1"
description = "Server-rendered HTML pages and a cached total-compute statistic for a cooperative inference orchestrator"
requires-python = ">=3.10"
dependencies = []
keywords = ["inference", "orchestrator", "html", "landing-page", "cache"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Internet :: WWW/HTTP :: Dynamic Content",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cocompute"]

[tool.pytest.ini_options]
addopts = "-ra"
