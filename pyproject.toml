[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tynbox"
version = "0.1.0"
description = "Small game sandbox: stage loop, 2D collisions, SDF dataset encoding, a space shooter and a grid maze"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "sandbox", "collision", "aabb", "maze", "barycentric", "lerp", "sdf"]
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
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tynbox"]

[tool.pytest.ini_options]
addopts = "-ra"
