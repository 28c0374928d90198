"""Message encoding and decoding for Galaxy Buds earbuds."""

__version__ = "0.1.0"