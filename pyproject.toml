[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wordbig"
version = "0.1.0"
description = "Fixed-width multi-word integers, decimal floats and fractions built from 32-bit words"
requires-python = ">=3.10"
dependencies = []
keywords = ["bigint", "fixed-width integers", "fractions", "booth division", "modular exponentiation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
wordbig-demo = "wordbig.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["wordbig"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
