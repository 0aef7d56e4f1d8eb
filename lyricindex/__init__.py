"""Tokenising, word counting and an inverted index over a folder of text files."""

__version__ = "0.1.0"
__all__ = ["__version__"]