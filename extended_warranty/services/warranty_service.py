"""
Warranty Service

Issues extended warranties at the point of sale.

For each request the service:
1. Validates the product code and client name
2. Applies the vowel-count eligibility rule
3. Rejects products that already carry a warranty
4. Looks up the product and prices the warranty
5. Computes the expiration date and stores the record
"""

import logging
from typing import Optional

from ..clock import Clock, system_clock
from ..compute.service import is_eligible, price_of, expiration_of
from ..errors import (
    RequiredParametersError,
    NotEligibleError,
    AlreadyHasWarrantyError,
    ProductNotFoundError,
)
from ..models import Warranty
from ..stores.base import ProductStore, WarrantyStore

logger = logging.getLogger(__name__)


class WarrantyService:
    """
    Point-of-sale service for extended warranties.

    Not safe for concurrent use: the duplicate check and the insert are
    two separate store calls, so callers sharing stores across threads
    must serialize generate() per product code.
    """

    def __init__(
        self,
        product_store: ProductStore,
        warranty_store: WarrantyStore,
        clock: Clock = system_clock
    ):
        """
        Initialize the warranty service.

        Args:
            product_store: Product catalog lookup
            warranty_store: Storage for issued warranties
            clock: Source of the request date (defaults to the system clock)
        """
        self.product_store = product_store
        self.warranty_store = warranty_store
        self.clock = clock

    def generate(self, code: Optional[str], client_name: Optional[str]) -> Warranty:
        """
        Register an extended warranty for a product.

        Args:
            code: Code of the product to cover
            client_name: Name of the client requesting the warranty

        Returns:
            The stored Warranty

        Raises:
            RequiredParametersError: code or client_name is missing or empty
            NotEligibleError: the code has exactly three vowels
            AlreadyHasWarrantyError: the product already has a warranty
            ProductNotFoundError: no product matches the code
        """
        if not code or not client_name:
            logger.info(f"Warranty rejected - reason=required_parameters, code={code!r}")
            raise RequiredParametersError()

        if not is_eligible(code):
            logger.info(f"Warranty rejected - reason=not_eligible, code={code}")
            raise NotEligibleError()

        if self.has_warranty(code):
            logger.info(f"Warranty rejected - reason=already_has_warranty, code={code}")
            raise AlreadyHasWarrantyError()

        product = self.product_store.get_by_code(code)
        if product is None:
            logger.warning(f"Warranty rejected - reason=product_not_found, code={code}")
            raise ProductNotFoundError(f"No product exists with code {code}")

        warranty_price = price_of(product.price)
        request_date = self.clock()
        # The warranty price, not the product price, selects the expiration tier
        expiration_date = expiration_of(request_date, warranty_price)

        warranty = Warranty(
            product=product,
            request_date=request_date,
            expiration_date=expiration_date,
            warranty_price=warranty_price,
            client_name=client_name
        )
        self.warranty_store.add(warranty)

        logger.info(
            f"Warranty issued - code={code}, client={client_name}, "
            f"price={warranty_price}, expires={expiration_date.date().isoformat()}"
        )
        return warranty

    def has_warranty(self, code: str) -> bool:
        """Check whether the product already has an extended warranty."""
        return self.warranty_store.get_by_product_code(code) is not None

    def get_warranty(self, code: str) -> Optional[Warranty]:
        """Retrieve the stored warranty for a product code."""
        return self.warranty_store.get_by_code(code)
