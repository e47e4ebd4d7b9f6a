"""Extended warranty rules for point-of-sale products."""

from .errors import (
    WarrantyError,
    RequiredParametersError,
    NotEligibleError,
    AlreadyHasWarrantyError,
    ProductNotFoundError,
    StoreError,
)
from .models import Product, Warranty
from .services import WarrantyService

__all__ = [
    "WarrantyError",
    "RequiredParametersError",
    "NotEligibleError",
    "AlreadyHasWarrantyError",
    "ProductNotFoundError",
    "StoreError",
    "Product",
    "Warranty",
    "WarrantyService",
]
