[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "toybox"
version = "0.1.0"
description = "Small command-line programs: integer ranges, pig latin, a guessing game, a tiny grep, a thread-pool web server and more."
requires-python = ">=3.10"
keywords = ["education", "exercises", "grep", "thread-pool", "pig-latin", "statistics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]
dependencies = [
    "aiohttp",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[project.scripts]
toybox-bitrange = "toybox.bitrange:main"
toybox-employees = "toybox.employees:main"
toybox-stats = "toybox.stats:main"
toybox-piglatin = "toybox.piglatin:main"
toybox-guess = "toybox.guessing:main"
toybox-rectangles = "toybox.rectangles:main"
toybox-hello = "toybox.greetings:main"
toybox-webserver = "toybox.webserver:main"
toybox-pagetitle = "toybox.pagetitle:main"
toybox-minigrep = "toybox.minigrep:main"

[tool.hatch.build.targets.wheel]
packages = ["toybox"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
