[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "triengine"
version = "0.1.0"
description = "A small 3D game engine: OBJ models, BMP textures and sprites, a fly-through camera, AABB collision and WAV sound"
requires-python = ">=3.10"
keywords = ["3d", "engine", "opengl", "obj", "bmp", "game", "rendering", "pyglet"]
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
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Games/Entertainment",
]
dependencies = [
    "numpy",
    "pyglet",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
triengine-demo = "triengine.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["triengine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
