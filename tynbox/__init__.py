"""Game sandbox: stage loop, shared math, collisions, SDF dataset packing and two small games."""

__version__ = "0.1.0"

__all__ = ["geometry", "stage", "sdf2d", "collisions", "spaceexp", "maze"]