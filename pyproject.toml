[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cbasics"
version = "0.1.0"
description = "Classic C-library style helpers: characters, byte buffers, strings, output, line reading, printf and signal messaging"
requires-python = ">=3.10"
dependencies = []
keywords = ["strings", "memory", "printf", "readline", "signals"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cbasics-talk-client = "cbasics.talk_client:main"
cbasics-talk-server = "cbasics.talk_server:main"

[tool.hatch.build.targets.wheel]
packages = ["cbasics"]

[tool.pytest.ini_options]
addopts = "-ra"
