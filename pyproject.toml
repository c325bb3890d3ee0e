[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "heavens_stdout"
version = "1.0.0"
description = "Random divine sentences and searches through an endless, seeded stream of letters."
requires-python = ">=3.10"
dependencies = []
keywords = ["random", "sentences", "oracle", "fortune", "string search", "kmp"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Fortune Cookies",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
heavens-stdout = "heavens_stdout.app:main"

[tool.hatch.build.targets.wheel]
packages = ["heavens_stdout"]

[tool.pytest.ini_options]
addopts = "-ra"
