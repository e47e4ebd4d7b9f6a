"""
Warranty Models

Pydantic models for the products sold at the point of sale and the extended
warranties issued for them. Both are immutable once created.
"""

from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def to_decimal(value: Any) -> Any:
    """Coerce ints, floats and strings to Decimal through their text form."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return Decimal(str(value))
    return value


class Product(BaseModel):
    """Product owned by the product store."""

    model_config = ConfigDict(frozen=True)

    code: str = Field(min_length=1, description="Unique product code")
    price: Decimal = Field(ge=0, description="Product sale price")
    name: Optional[str] = None

    @field_validator("price", mode="before")
    @classmethod
    def coerce_price(cls, value: Any) -> Any:
        return to_decimal(value)


class Warranty(BaseModel):
    """
    Extended warranty record.

    Holds a reference to the product it covers; at most one warranty
    exists per product code.
    """

    model_config = ConfigDict(frozen=True)

    product: Product
    request_date: datetime
    expiration_date: datetime
    warranty_price: Decimal = Field(ge=0)
    client_name: str

    @field_validator("warranty_price", mode="before")
    @classmethod
    def coerce_warranty_price(cls, value: Any) -> Any:
        return to_decimal(value)

    @property
    def product_code(self) -> str:
        return self.product.code

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-friendly dictionary."""
        return self.model_dump(mode="json")
