"""
Warranty Errors

Every rejection raised by the warranty rules derives from WarrantyError and
carries a stable error_code alongside the human readable message.
"""

from typing import Any, Dict, Optional


class WarrantyError(Exception):
    """Base error for warranty rule violations."""

    error_code = "WARRANTY_ERROR"
    default_message = "Warranty request failed"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Error payload in the same shape as compute results."""
        return {
            "status": "error",
            "error_code": self.error_code,
            "message": self.message
        }


class RequiredParametersError(WarrantyError):
    """Raised when the product code or the client name is missing."""

    error_code = "REQUIRED_PARAMETERS"
    default_message = "The product code and the client name are required"


class NotEligibleError(WarrantyError):
    """Raised when the product code has exactly three vowels."""

    error_code = "NOT_ELIGIBLE"
    default_message = "This product is not eligible for an extended warranty"


class AlreadyHasWarrantyError(WarrantyError):
    """Raised when the product already has an extended warranty."""

    error_code = "ALREADY_HAS_WARRANTY"
    default_message = "The product already has an extended warranty"


class ProductNotFoundError(WarrantyError):
    """Raised when no product matches the requested code."""

    error_code = "PRODUCT_NOT_FOUND"
    default_message = "No product exists with the requested code"


class StoreError(WarrantyError):
    """Raised when a backing store cannot be read or written."""

    error_code = "STORE_ERROR"
    default_message = "Warranty store is unavailable"
