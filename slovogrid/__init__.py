"""A console word-grid game in which players add letters and trace dictionary words."""

__version__ = "0.1.0"
__all__ = ["__version__"]