[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "superobject"
version = "0.1.0"
description = "Combine feature definitions into super objects and generate the matching JavaScript classes"
requires-python = ">=3.10"
dependencies = []
keywords = ["feature definition", "code generation", "json", "javascript", "super object"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Code Generators",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
so-generator = "superobject.so_generator:main"
js-generator = "superobject.js_generator:main"

[tool.hatch.build.targets.wheel]
packages = ["superobject"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
