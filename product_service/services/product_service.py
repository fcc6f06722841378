"""
Product service business logic
"""

from datetime import datetime
from typing import Optional, List, Protocol
from uuid import uuid4

import structlog

from product_service.models.product import Product, ProductPayload
from product_service.utils.config import AppConfig
from product_service.utils.database import ProductDatabase
from product_service.utils.memory_store import InMemoryProductStore
from product_service.utils.store import ProductStore


logger = structlog.get_logger(__name__)


class ProductManager(Protocol):
    """Collaborator contract consumed by the product routes"""

    async def create(self, payload: ProductPayload) -> str: ...

    async def list_all(self) -> List[Product]: ...

    async def list_by_category(self, category: str) -> List[Product]: ...

    async def list_by_supplier(self, supplier_id: str) -> List[Product]: ...

    async def list_shortage(self) -> List[Product]: ...

    async def get_by_id(self, product_id: str) -> Optional[Product]: ...

    async def update(self, product_id: str, payload: ProductPayload) -> bool: ...

    async def delete(self, product_id: str) -> bool: ...


def build_store(config: AppConfig) -> ProductStore:
    """Pick the store implementation named by the configuration"""
    if config.storage_backend == "memory":
        return InMemoryProductStore()
    return ProductDatabase()


class ProductService:
    """High-level product business logic service"""

    def __init__(self, store: ProductStore):
        self.store = store

    async def create(self, payload: ProductPayload) -> str:
        """
        Store a new product and return its generated id.
        Any id supplied in the payload is ignored.
        """
        now = datetime.utcnow()
        product = Product.from_payload(str(uuid4()), payload, created_at=now, updated_at=now)
        try:
            await self.store.insert(product)
        except Exception as e:
            logger.error("Failed to create product", error=str(e))
            raise

        logger.info("Product created", product_id=product.id, category=product.category,
                    supplier_id=product.supplier_id)
        return product.id

    async def list_all(self) -> List[Product]:
        return await self.store.fetch_all()

    async def list_by_category(self, category: str) -> List[Product]:
        return await self.store.fetch_by_category(category)

    async def list_by_supplier(self, supplier_id: str) -> List[Product]:
        return await self.store.fetch_by_supplier(supplier_id)

    async def list_shortage(self) -> List[Product]:
        """Products with quantity at or below their minimum stock"""
        return await self.store.fetch_shortage()

    async def get_by_id(self, product_id: str) -> Optional[Product]:
        return await self.store.fetch_by_id(product_id)

    async def update(self, product_id: str, payload: ProductPayload) -> bool:
        """
        Fully replace a product's fields, keeping its id.
        Returns False when no product has the id.
        """
        existing = await self.store.fetch_by_id(product_id)
        if existing is None:
            logger.info("Product update skipped, not found", product_id=product_id)
            return False

        product = Product.from_payload(
            product_id, payload, created_at=existing.created_at, updated_at=datetime.utcnow()
        )
        try:
            updated = await self.store.replace(product)
        except Exception as e:
            logger.error("Failed to update product", product_id=product_id, error=str(e))
            raise

        if updated:
            logger.info("Product updated", product_id=product_id)
        return updated

    async def delete(self, product_id: str) -> bool:
        """Remove a product; False when no product has the id"""
        try:
            deleted = await self.store.remove(product_id)
        except Exception as e:
            logger.error("Failed to delete product", product_id=product_id, error=str(e))
            raise

        if deleted:
            logger.info("Product deleted", product_id=product_id)
        else:
            logger.info("Product delete skipped, not found", product_id=product_id)
        return deleted
