"""In-memory document store for catalog products, articles and orders."""

__version__ = "0.1.0"
