[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "goofymesh"
version = "0.1.0"
description = "Triangle mesh building, editing, OBJ loading and draw batching in plain Python"
requires-python = ">=3.10"
dependencies = []
keywords = ["mesh", "3d", "obj", "wavefront", "geometry", "batching"]
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
    "Topic :: Multimedia :: Graphics :: 3D Modeling",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["goofymesh"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
