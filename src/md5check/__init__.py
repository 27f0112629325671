"""MD5 checksum computation and manifest verification."""

__version__ = "0.1.0"
