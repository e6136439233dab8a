"""A small plain-text editor with background file loading."""

__version__ = "0.1.0"
__all__ = ["__version__"]