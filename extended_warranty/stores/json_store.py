"""
JSON File Stores
================
Persistent store implementations backed by a single JSON document per store.

Each document maps a product code to the serialized record. Files are
created on first write; a missing file reads as an empty store.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

from pydantic import ValidationError

from ..errors import StoreError
from ..models import Product, Warranty

logger = logging.getLogger(__name__)


class _JsonDocument:
    """Load and save a {code: record} JSON document."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def load(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise StoreError(f"Could not read store file {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise StoreError(f"Store file {self.path} does not contain a JSON object")
        return data

    def save(self, data: Dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, sort_keys=True)
            tmp_path.replace(self.path)
        except OSError as e:
            raise StoreError(f"Could not write store file {self.path}: {e}") from e


class JsonFileProductStore:
    """Product catalog persisted to a JSON file."""

    def __init__(self, path: Union[str, Path]):
        self._document = _JsonDocument(path)

    @property
    def path(self) -> Path:
        return self._document.path

    def add(self, product: Product) -> None:
        data = self._document.load()
        data[product.code] = product.model_dump(mode="json")
        self._document.save(data)
        logger.debug(f"Product persisted - code={product.code}, path={self.path}")

    def add_all(self, products: Iterable[Product]) -> None:
        data = self._document.load()
        for product in products:
            data[product.code] = product.model_dump(mode="json")
        self._document.save(data)

    def get_by_code(self, code: str) -> Optional[Product]:
        record = self._document.load().get(code)
        if record is None:
            return None
        return _validate(Product, record, self.path)

    def list_all(self) -> List[Product]:
        return [_validate(Product, r, self.path) for r in self._document.load().values()]


class JsonFileWarrantyStore:
    """Issued warranties persisted to a JSON file keyed by product code."""

    def __init__(self, path: Union[str, Path]):
        self._document = _JsonDocument(path)

    @property
    def path(self) -> Path:
        return self._document.path

    def get_by_product_code(self, code: str) -> Optional[Warranty]:
        return self.get_by_code(code)

    def get_by_code(self, code: str) -> Optional[Warranty]:
        record = self._document.load().get(code)
        if record is None:
            return None
        return _validate(Warranty, record, self.path)

    def add(self, warranty: Warranty) -> None:
        data = self._document.load()
        data[warranty.product_code] = warranty.to_dict()
        self._document.save(data)
        logger.debug(f"Warranty persisted - code={warranty.product_code}, path={self.path}")

    def list_all(self) -> List[Warranty]:
        return [_validate(Warranty, r, self.path) for r in self._document.load().values()]


def _validate(model, record: Any, path: Path):
    try:
        return model.model_validate(record)
    except ValidationError as e:
        raise StoreError(f"Invalid {model.__name__} record in {path}: {e}") from e
