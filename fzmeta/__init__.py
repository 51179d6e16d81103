"""Text, path and command-line helpers with small vector and 4x4 matrix maths."""

__version__ = "0.1.0"