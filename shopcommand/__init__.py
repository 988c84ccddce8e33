"""Command side of a product catalogue: validated category and product changes stored in MySQL."""

__version__ = "0.1.0"