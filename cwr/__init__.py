"""Voxel world data: packed chunks, coordinates, block faces, load ordering and terrain filling."""

__version__ = "0.1.0"