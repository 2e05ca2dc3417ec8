"""A small vector shape editor with SVG loading and saving."""

__version__ = "0.1.0"
__all__ = ["__version__"]