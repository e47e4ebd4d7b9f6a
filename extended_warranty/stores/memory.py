"""
In-memory store implementations for testing and the demo runner.
"""
import logging
from typing import Dict, Iterable, List, Optional

from ..models import Product, Warranty

logger = logging.getLogger(__name__)


class InMemoryProductStore:
    """Product catalog held in a dictionary keyed by code."""

    def __init__(self, products: Iterable[Product] = ()):
        self._store: Dict[str, Product] = {}
        for product in products:
            self.add(product)

    def add(self, product: Product) -> None:
        """Add or replace a product in the catalog."""
        self._store[product.code] = product
        logger.debug(f"Product stored - code={product.code}")

    def get_by_code(self, code: str) -> Optional[Product]:
        return self._store.get(code)

    def list_all(self) -> List[Product]:
        return list(self._store.values())


class InMemoryWarrantyStore:
    """Issued warranties held in a dictionary keyed by product code."""

    def __init__(self):
        self._store: Dict[str, Warranty] = {}

    def get_by_product_code(self, code: str) -> Optional[Warranty]:
        return self._store.get(code)

    def get_by_code(self, code: str) -> Optional[Warranty]:
        return self._store.get(code)

    def add(self, warranty: Warranty) -> None:
        # Uniqueness is checked by the service, not here
        self._store[warranty.product_code] = warranty
        logger.debug(f"Warranty stored - code={warranty.product_code}")

    def list_all(self) -> List[Warranty]:
        return list(self._store.values())
