[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "imge"
version = "0.1.0"
description = "A small component-based 2D game engine with JSON scenes, tags, hitboxes and pygame screen and input services"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "engine", "2d", "pygame", "components", "scene", "hitbox"]
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
    "Topic :: Software Development :: Libraries :: pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["imge"]

[tool.pytest.ini_options]
addopts = "-ra"
