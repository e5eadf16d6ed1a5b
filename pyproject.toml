[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spanda"
version = "0.8.0"
description = "Animation primitives: Bezier and motion paths, keyframe tracks, shape morphing, inertia and text splitting."
requires-python = ">=3.10"
dependencies = []
keywords = ["animation", "tween", "keyframe", "bezier", "motion-path", "morph", "inertia"]
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
    "Topic :: Multimedia :: Graphics",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["spanda"]

[tool.hatch.build.targets.sdist]
include = ["spanda", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
