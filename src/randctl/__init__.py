"""randctl — secure random strings, passwords, and identifiers."""

__version__ = "0.1.0"
