[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bbimager"
version = "0.0.7"
description = "Core state, progress and persistence logic for a BeagleBoard imaging utility"
requires-python = ">=3.10"
keywords = ["beagleboard", "imaging", "flashing", "sd-card", "easing", "progress"]
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
    "Topic :: System :: Installation/Setup",
]
dependencies = [
    "platformdirs",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["bbimager"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
