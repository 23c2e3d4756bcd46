"""Procedural forest level generation."""

__version__ = "0.1.0"
