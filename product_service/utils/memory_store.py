"""
In-process product store for local runs and tests
"""

import asyncio
from datetime import datetime
from typing import Dict, List, Optional, Callable

import structlog

from product_service.models.product import Product


logger = structlog.get_logger(__name__)


class InMemoryProductStore:
    """Dict-backed product store; every read returns copies"""

    def __init__(self):
        self._products: Dict[str, Product] = {}
        self._lock = asyncio.Lock()

    async def initialize(self):
        logger.info("In-memory product store ready")

    async def close(self):
        self._products.clear()
        logger.info("In-memory product store cleared")

    async def ping(self):
        return None

    def _select(self, predicate: Callable[[Product], bool]) -> List[Product]:
        matches = [p for p in self._products.values() if predicate(p)]
        # stable sort keeps insertion order among equal timestamps
        matches.sort(key=lambda p: p.created_at or datetime.min)
        return [p.model_copy(deep=True) for p in matches]

    async def insert(self, product: Product) -> None:
        async with self._lock:
            if product.id in self._products:
                raise ValueError(f"Product '{product.id}' already exists")
            self._products[product.id] = product.model_copy(deep=True)

    async def fetch_all(self) -> List[Product]:
        return self._select(lambda p: True)

    async def fetch_by_category(self, category: str) -> List[Product]:
        return self._select(lambda p: p.category == category)

    async def fetch_by_supplier(self, supplier_id: str) -> List[Product]:
        return self._select(lambda p: p.supplier_id == supplier_id)

    async def fetch_shortage(self) -> List[Product]:
        return self._select(lambda p: p.in_shortage())

    async def fetch_by_id(self, product_id: str) -> Optional[Product]:
        product = self._products.get(product_id)
        if product is None:
            return None
        return product.model_copy(deep=True)

    async def replace(self, product: Product) -> bool:
        async with self._lock:
            existing = self._products.get(product.id)
            if existing is None:
                return False
            # creation time belongs to the original record
            stored = product.model_copy(deep=True, update={"created_at": existing.created_at})
            self._products[product.id] = stored
            return True

    async def remove(self, product_id: str) -> bool:
        async with self._lock:
            return self._products.pop(product_id, None) is not None
