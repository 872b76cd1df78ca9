"""Internal implementation package for ModlogKit."""

__version__ = "0.1.0"
