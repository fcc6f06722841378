"""
Storage contract shared by the product stores
"""

from typing import List, Optional, Protocol

from product_service.models.product import Product


class ProductStore(Protocol):
    """Persistence operations the product service relies on"""

    async def initialize(self) -> None: ...

    async def close(self) -> None: ...

    async def ping(self) -> None: ...

    async def insert(self, product: Product) -> None: ...

    async def fetch_all(self) -> List[Product]: ...

    async def fetch_by_category(self, category: str) -> List[Product]: ...

    async def fetch_by_supplier(self, supplier_id: str) -> List[Product]: ...

    async def fetch_shortage(self) -> List[Product]: ...

    async def fetch_by_id(self, product_id: str) -> Optional[Product]: ...

    async def replace(self, product: Product) -> bool: ...

    async def remove(self, product_id: str) -> bool: ...
