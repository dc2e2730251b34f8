"""Dwiju gateway — capability handlers relaying to hosted AI providers."""

__version__ = "1.0.0"
