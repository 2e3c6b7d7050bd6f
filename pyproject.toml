[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gridvis"
version = "0.1.0"
description = "Animate colour grids computed by serial, threaded or callback-driven code"
requires-python = ">=3.10"
keywords = ["visualization", "animation", "grid", "parallel", "education", "threads"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Visualization",
    "Topic :: Education",
]
dependencies = [
    "numpy",
    "pillow",
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
gridvis-demo = "gridvis.demos:main"

[tool.hatch.build.targets.wheel]
packages = ["gridvis"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
