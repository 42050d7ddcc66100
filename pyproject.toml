[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dax"
version = "0.1.0"
description = "Single-precision math helpers, colours, materials and procedural geometry for small scene graphs"
requires-python = ">=3.11"
dependencies = [
    "scipy",
]
keywords = [
    "float32",
    "math",
    "geometry",
    "color",
    "hsl",
    "mesh",
    "graphics",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Multimedia :: Graphics :: 3D Modeling",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["dax"]

[tool.hatch.build.targets.sdist]
include = [
    "dax",
    "tests",
]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py311"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.11"
warn_unused_ignores = true
warn_redundant_casts = true
