[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stationarity"
version = "0.1.0"
description = "KPSS stationarity test and differencing-order selection for time series"
requires-python = ">=3.10"
dependencies = []
keywords = ["time series", "kpss", "stationarity", "differencing", "arima", "statistics"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["stationarity"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
