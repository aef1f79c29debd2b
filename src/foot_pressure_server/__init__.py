"""Foot pressure history and analytics server."""

__version__ = "0.3.0"
