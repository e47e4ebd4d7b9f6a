"""
Tests for the Product and Warranty models.
"""

import pytest
from datetime import datetime
from decimal import Decimal
from pydantic import ValidationError

from extended_warranty import Product, Warranty


class TestProduct:

    def test_price_coerced_to_decimal(self):
        assert Product(code="A1", price=0.1).price == Decimal("0.1")
        assert Product(code="A1", price=500001).price == Decimal("500001")

    def test_empty_code_rejected(self):
        with pytest.raises(ValidationError):
            Product(code="", price=10)

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError):
            Product(code="A1", price=-1)

    def test_frozen(self):
        product = Product(code="A1", price=10)
        with pytest.raises(ValidationError):
            product.price = Decimal("20")


class TestWarranty:

    def test_product_code_and_dict(self):
        warranty = Warranty(
            product=Product(code="S01H1AT51", price=200000),
            request_date=datetime(2018, 8, 16),
            expiration_date=datetime(2018, 11, 24),
            warranty_price=20000,
            client_name="ClientePrueba"
        )

        assert warranty.product_code == "S01H1AT51"
        data = warranty.to_dict()
        assert data["expiration_date"] == "2018-11-24T00:00:00"
        assert data["product"]["code"] == "S01H1AT51"
