"""eden: marketplace backend: users, products, carts, comments, favorites."""

__version__ = "0.1.0"
