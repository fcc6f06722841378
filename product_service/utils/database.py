"""
Database utilities for product service
"""

import json
from typing import Optional, List, Dict, Any

import asyncpg
import structlog
from asyncpg import Pool

from product_service.models.product import Product
from product_service.utils.config import DatabaseConfig, get_db_config


logger = structlog.get_logger(__name__)


SCHEMA_SQL = """
    CREATE TABLE IF NOT EXISTS products (
        id TEXT PRIMARY KEY,
        name TEXT,
        category TEXT,
        supplier_id TEXT,
        quantity INTEGER NOT NULL DEFAULT 0,
        minimum_stock INTEGER NOT NULL DEFAULT 0,
        price DOUBLE PRECISION,
        attributes JSONB NOT NULL DEFAULT '{}'::jsonb,
        created_at TIMESTAMP NOT NULL,
        updated_at TIMESTAMP NOT NULL
    );
    CREATE INDEX IF NOT EXISTS idx_products_category ON products (category);
    CREATE INDEX IF NOT EXISTS idx_products_supplier_id ON products (supplier_id);
"""

SELECT_COLUMNS = (
    "id, name, category, supplier_id, quantity, minimum_stock, price, "
    "attributes, created_at, updated_at"
)

ORDER_BY = "ORDER BY created_at ASC, id ASC"


def _row_to_product(row) -> Product:
    """Convert a products row into a Product, inlining stored attributes"""
    data: Dict[str, Any] = dict(row)
    attributes = data.pop('attributes', None) or {}
    if isinstance(attributes, str):
        attributes = json.loads(attributes)
    return Product(**data, **attributes)


class ProductDatabase:
    """Database connection and operations for product service"""

    def __init__(self, config: Optional[DatabaseConfig] = None):
        self.pool: Optional[Pool] = None
        self.config = config or get_db_config()

    async def initialize(self):
        """Initialize database connection pool and ensure the products table exists"""
        try:
            self.pool = await asyncpg.create_pool(**self.config.pool_kwargs())
            logger.info("Database pool created", database=self.config.postgres_db)

            async with self.pool.acquire() as conn:
                await conn.execute(SCHEMA_SQL)
                logger.info("Products schema ensured")

        except Exception as e:
            logger.error("Failed to initialize database", error=str(e))
            raise

    async def close(self):
        """Close database connection pool"""
        if self.pool:
            await self.pool.close()
            self.pool = None
            logger.info("Database pool closed")

    def _require_pool(self) -> Pool:
        if not self.pool:
            raise RuntimeError("Database pool not initialized")
        return self.pool

    async def ping(self):
        """Round-trip a trivial query"""
        async with self._require_pool().acquire() as conn:
            await conn.execute('SELECT 1')

    async def _fetch_products(self, where: str = "", *args) -> List[Product]:
        query = f"SELECT {SELECT_COLUMNS} FROM products {where} {ORDER_BY}"
        async with self._require_pool().acquire() as conn:
            rows = await conn.fetch(query, *args)
        return [_row_to_product(row) for row in rows]

    # ===== PRODUCT OPERATIONS =====

    async def insert(self, product: Product) -> None:
        """Insert a new product row"""
        async with self._require_pool().acquire() as conn:
            try:
                await conn.execute("""
                    INSERT INTO products (
                        id, name, category, supplier_id, quantity, minimum_stock,
                        price, attributes, created_at, updated_at
                    ) VALUES ($1, $2, $3, $4, $5, $6, $7, $8::jsonb, $9, $10)
                """,
                    product.id,
                    product.name,
                    product.category,
                    product.supplier_id,
                    product.quantity,
                    product.minimum_stock,
                    product.price,
                    json.dumps(product.attributes()),
                    product.created_at,
                    product.updated_at
                )
                logger.info("Product row inserted", product_id=product.id)

            except Exception as e:
                logger.error("Failed to insert product", product_id=product.id, error=str(e))
                raise

    async def fetch_all(self) -> List[Product]:
        """Get every product"""
        try:
            return await self._fetch_products()
        except Exception as e:
            logger.error("Failed to fetch products", error=str(e))
            raise

    async def fetch_by_category(self, category: str) -> List[Product]:
        """Get products in a category"""
        try:
            return await self._fetch_products("WHERE category = $1", category)
        except Exception as e:
            logger.error("Failed to fetch products by category", category=category, error=str(e))
            raise

    async def fetch_by_supplier(self, supplier_id: str) -> List[Product]:
        """Get products from a supplier"""
        try:
            return await self._fetch_products("WHERE supplier_id = $1", supplier_id)
        except Exception as e:
            logger.error("Failed to fetch products by supplier", supplier_id=supplier_id, error=str(e))
            raise

    async def fetch_shortage(self) -> List[Product]:
        """Get products whose stock is at or below their reorder threshold"""
        try:
            return await self._fetch_products("WHERE quantity <= minimum_stock")
        except Exception as e:
            logger.error("Failed to fetch products in shortage", error=str(e))
            raise

    async def fetch_by_id(self, product_id: str) -> Optional[Product]:
        """Get product by ID"""
        async with self._require_pool().acquire() as conn:
            try:
                row = await conn.fetchrow(
                    f"SELECT {SELECT_COLUMNS} FROM products WHERE id = $1",
                    product_id
                )
                if row:
                    return _row_to_product(row)
                return None

            except Exception as e:
                logger.error("Failed to get product", product_id=product_id, error=str(e))
                raise

    async def replace(self, product: Product) -> bool:
        """Overwrite every mutable column of an existing product"""
        async with self._require_pool().acquire() as conn:
            try:
                result = await conn.fetchval("""
                    UPDATE products
                    SET name = $1, category = $2, supplier_id = $3, quantity = $4,
                        minimum_stock = $5, price = $6, attributes = $7::jsonb,
                        updated_at = $8
                    WHERE id = $9
                    RETURNING id
                """,
                    product.name,
                    product.category,
                    product.supplier_id,
                    product.quantity,
                    product.minimum_stock,
                    product.price,
                    json.dumps(product.attributes()),
                    product.updated_at,
                    product.id
                )

                if result:
                    logger.info("Product row updated", product_id=product.id)
                    return True
                return False

            except Exception as e:
                logger.error("Failed to update product", product_id=product.id, error=str(e))
                raise

    async def remove(self, product_id: str) -> bool:
        """Delete a product row"""
        async with self._require_pool().acquire() as conn:
            try:
                result = await conn.fetchval(
                    "DELETE FROM products WHERE id = $1 RETURNING id",
                    product_id
                )

                if result:
                    logger.info("Product row deleted", product_id=product_id)
                    return True
                return False

            except Exception as e:
                logger.error("Failed to delete product", product_id=product_id, error=str(e))
                raise
