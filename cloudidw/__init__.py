"""Inverse distance weighting of random 3D point clouds onto a regular grid."""

__version__ = "0.1.0"
__all__ = ["point", "grid", "kdtree", "idw", "cli"]