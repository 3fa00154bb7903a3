[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shopdomain"
version = "0.1.0"
description = "Domain model and use cases for an online shop: customers, products and orders"
requires-python = ">=3.10"
dependencies = []
keywords = ["domain-driven-design", "clean-architecture", "online-shop", "orders", "inventory"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["shopdomain"]

[tool.pytest.ini_options]
addopts = "-ra"
