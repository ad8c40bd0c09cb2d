"""A small 3D game engine: OBJ models, BMP sprites, a fly-through camera, AABB collision and WAV sound."""

__version__ = "0.1.0"