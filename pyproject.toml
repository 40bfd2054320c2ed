[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "molliekit"
version = "0.1.0"
description = "Models and services for the Mollie payments API: profiles, settlements, shipments, terminals, vouchers and wallets."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "mollie",
    "payments",
    "profiles",
    "settlements",
    "shipments",
    "terminals",
    "idempotency",
    "pagination",
]
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
    "Topic :: Office/Business :: Financial",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["molliekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
