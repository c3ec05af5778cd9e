[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ebeatkit"
version = "0.1.0"
description = "Rhythm-game helpers: easing curves, song metadata loading, text block layout and QR code generation"
requires-python = ">=3.10"
dependencies = []
keywords = ["rhythm-game", "easing", "qr-code", "text-layout", "music-metadata"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ebeatkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
