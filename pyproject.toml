[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bidikit"
version = "1.0.4"
description = "Bidirectional text building blocks: bidi types, Arabic joining and run lists"
requires-python = ">=3.10"
dependencies = []
keywords = ["bidi", "unicode", "arabic", "hebrew", "joining", "rtl"]
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
    "Topic :: Text Processing :: Linguistic",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bidikit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
