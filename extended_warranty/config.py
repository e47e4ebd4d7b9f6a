"""
Configuration Management for Extended Warranty
===============================================
Centralized configuration for logging and store backends.
"""

import os
from pathlib import Path
from typing import Literal, Tuple

from pydantic import BaseModel, Field

from .stores import (
    ProductStore,
    WarrantyStore,
    InMemoryProductStore,
    InMemoryWarrantyStore,
    JsonFileProductStore,
    JsonFileWarrantyStore,
)


class WarrantyConfig(BaseModel):
    """Main configuration for the extended warranty service."""

    log_level: str = Field(
        default="INFO",
        description="Logging level name"
    )
    store_backend: Literal["memory", "json"] = Field(
        default="memory",
        description="Where products and warranties are kept"
    )
    data_dir: str = Field(
        default="data",
        description="Directory holding the JSON store files"
    )

    def products_path(self) -> Path:
        """Path of the JSON product catalog."""
        return Path(self.data_dir) / "products.json"

    def warranties_path(self) -> Path:
        """Path of the JSON warranty store."""
        return Path(self.data_dir) / "warranties.json"

    @classmethod
    def from_env(cls) -> "WarrantyConfig":
        """Load configuration from environment variables."""
        return cls(
            log_level=os.environ.get("WARRANTY_LOG_LEVEL", "INFO").upper(),
            store_backend=os.environ.get("WARRANTY_STORE_BACKEND", "memory").lower(),
            data_dir=os.environ.get("WARRANTY_DATA_DIR", "data")
        )


def build_stores(config: WarrantyConfig) -> Tuple[ProductStore, WarrantyStore]:
    """Create the product and warranty stores for the configured backend."""
    if config.store_backend == "json":
        return (
            JsonFileProductStore(config.products_path()),
            JsonFileWarrantyStore(config.warranties_path())
        )
    return InMemoryProductStore(), InMemoryWarrantyStore()
