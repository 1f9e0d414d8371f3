[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "softrender"
version = "0.1.0"
description = "A small software 3D renderer: matrices, quaternions, frustum clipping, wireframe rasterisation and an interactive viewer"
requires-python = ">=3.10"
keywords = ["3d", "rendering", "software-rasterizer", "graphics", "wavefront-obj", "quaternion", "wireframe"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
softrender = "softrender.app:main"

[tool.hatch.build.targets.wheel]
packages = ["softrender"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
