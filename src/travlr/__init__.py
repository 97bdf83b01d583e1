"""Travlr travel booking admin API."""

__version__ = "0.1.0"
