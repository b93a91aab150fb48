[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "astrokit"
version = "0.1.0"
description = "Adaptive Runge-Kutta integrators, low-precision Sun, Moon and planet ephemerides, and orbit propagation settings"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "astronomy",
    "astrodynamics",
    "ephemeris",
    "runge-kutta",
    "ode",
    "sun",
    "moon",
    "planets",
    "sunrise",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Astronomy",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["astrokit"]

[tool.hatch.build.targets.sdist]
include = [
    "astrokit",
    "tests",
]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
ignore_missing_imports = true
