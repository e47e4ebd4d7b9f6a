"""Shared fixtures for warranty tests."""

from datetime import datetime

import pytest

from extended_warranty import Product, WarrantyService
from extended_warranty.clock import fixed_clock
from extended_warranty.stores import InMemoryProductStore, InMemoryWarrantyStore


REQUEST_DATE = datetime(2018, 8, 16, 10, 30)


@pytest.fixture
def product_store():
    """Catalog with a high tier, a low tier and a threshold product."""
    return InMemoryProductStore([
        Product(code="F01TSA0150", name="Lenovo Laptop", price=780000),
        Product(code="S01H1AT51", name="Washing Machine", price=200000),
        Product(code="T4B3L3T4", name="Tablet", price=500000),
        Product(code="FE1TSA0A50", name="Sound Bar", price=350000),
    ])


@pytest.fixture
def warranty_store():
    return InMemoryWarrantyStore()


@pytest.fixture
def request_date():
    return REQUEST_DATE


@pytest.fixture
def service(product_store, warranty_store, request_date):
    """Service whose clock is pinned to the request date."""
    return WarrantyService(product_store, warranty_store, clock=fixed_clock(request_date))
