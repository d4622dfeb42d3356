"""Scene parsing, grid raycasting and player movement for a .cub maze game."""

__version__ = "0.1.0"
__all__ = ["__version__"]