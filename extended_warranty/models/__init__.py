"""Models Package - Data models for products and extended warranties."""

from .warranty import Product, Warranty

__all__ = ["Product", "Warranty"]
