"""Core configuration, logging and shared helpers."""
