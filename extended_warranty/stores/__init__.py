"""Stores Package - Product and warranty lookup services."""

from .base import ProductStore, WarrantyStore
from .memory import InMemoryProductStore, InMemoryWarrantyStore
from .json_store import JsonFileProductStore, JsonFileWarrantyStore

__all__ = [
    "ProductStore",
    "WarrantyStore",
    "InMemoryProductStore",
    "InMemoryWarrantyStore",
    "JsonFileProductStore",
    "JsonFileWarrantyStore",
]
