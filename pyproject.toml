[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pluginrelease"
version = "0.1.0"
description = "Build Unreal Engine plugins in batch for several engine versions and package each release."
requires-python = ">=3.10"
dependencies = []
keywords = ["unreal", "unreal-engine", "plugin", "release", "build", "packaging"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: Microsoft :: Windows",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Build Tools",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pluginrelease = "pluginrelease.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pluginrelease"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
