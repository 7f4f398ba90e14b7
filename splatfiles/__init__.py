"""Coordinates, site files, user terrain point files and settings for SPLAT! work."""

__version__ = "0.1.0"
__all__ = ["coords", "settings", "qth", "udt", "udt_document"]