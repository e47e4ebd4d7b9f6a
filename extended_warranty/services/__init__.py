"""Services Package - Warranty issuing service."""

from .warranty_service import WarrantyService

__all__ = ["WarrantyService"]
