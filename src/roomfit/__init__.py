"""Check whether furniture fits in an observed space."""

__version__ = "0.1.0"
