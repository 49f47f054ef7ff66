"""A small software renderer that projects and draws wireframe meshes."""

__version__ = "0.1.0"