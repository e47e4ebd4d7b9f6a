"""
Store Interfaces

Capability interfaces the warranty service depends on. Any object with
matching methods can be plugged in; no base class is required.
"""

from typing import Optional, Protocol, runtime_checkable

from ..models import Product, Warranty


@runtime_checkable
class ProductStore(Protocol):
    """Read access to the product catalog."""

    def get_by_code(self, code: str) -> Optional[Product]:
        """Return the product with the given code, or None."""
        ...


@runtime_checkable
class WarrantyStore(Protocol):
    """Storage for issued extended warranties, keyed by product code."""

    def get_by_product_code(self, code: str) -> Optional[Warranty]:
        """Return the warranty covering the product, or None. Used as an existence check."""
        ...

    def get_by_code(self, code: str) -> Optional[Warranty]:
        """Retrieve a stored warranty by product code."""
        ...

    def add(self, warranty: Warranty) -> None:
        """Persist a new warranty."""
        ...
