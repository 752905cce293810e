"""exclctl — exclusion rules for time tracking."""

__version__ = "0.1.0"
