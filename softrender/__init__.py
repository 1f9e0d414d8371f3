"""A small software 3D renderer: math, clipping, wireframe drawing, OBJ loading and a pygame viewer."""

__version__ = "0.1.0"