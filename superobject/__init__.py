"""Combine feature definitions into super objects and generate their JavaScript classes."""

__version__ = "0.1.0"
__all__ = ["feature", "js_generator", "so_generator"]