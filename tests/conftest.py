"""
Pytest fixtures for product service tests
"""

import pytest
from unittest.mock import AsyncMock, MagicMock
from typing import Dict, Any
from datetime import datetime

from fastapi.testclient import TestClient

from product_service.main import create_app
from product_service.models.product import Product
from product_service.utils.memory_store import InMemoryProductStore
from product_service.services.product_service import ProductService


@pytest.fixture
def memory_store():
    """Fresh in-memory product store"""
    return InMemoryProductStore()


@pytest.fixture
def product_service(memory_store):
    """ProductService backed by the in-memory store"""
    return ProductService(memory_store)


@pytest.fixture
def client(memory_store):
    """Test client running the full app lifespan against the in-memory store"""
    app = create_app(store=memory_store)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def mock_service():
    """Mocked collaborator satisfying the product service contract"""
    service = MagicMock()
    service.create = AsyncMock(return_value="P100")
    service.list_all = AsyncMock(return_value=[])
    service.list_by_category = AsyncMock(return_value=[])
    service.list_by_supplier = AsyncMock(return_value=[])
    service.list_shortage = AsyncMock(return_value=[])
    service.get_by_id = AsyncMock(return_value=None)
    service.update = AsyncMock(return_value=False)
    service.delete = AsyncMock(return_value=False)
    return service


@pytest.fixture
def mocked_client(memory_store, mock_service):
    """Test client whose routes talk to the mocked collaborator"""
    app = create_app(store=memory_store)
    with TestClient(app, raise_server_exceptions=False) as test_client:
        app.state.product_service = mock_service
        yield test_client


@pytest.fixture
def mock_db_pool():
    """Mock asyncpg database pool"""
    pool = MagicMock()
    conn = AsyncMock()

    # Configure connection context manager
    pool.acquire.return_value.__aenter__ = AsyncMock(return_value=conn)
    pool.acquire.return_value.__aexit__ = AsyncMock(return_value=None)
    pool.close = AsyncMock()

    return pool, conn


@pytest.fixture
def sample_product_data() -> Dict[str, Any]:
    """Sample product payload for tests"""
    return {
        "name": "Cordless Drill",
        "category": "tools",
        "supplierId": "S1",
        "quantity": 12,
        "minimumStock": 3,
        "price": 129.0,
        "color": "yellow"
    }


@pytest.fixture
def sample_product_row() -> Dict[str, Any]:
    """Sample products table row for tests"""
    return {
        "id": "P100",
        "name": "Cordless Drill",
        "category": "tools",
        "supplier_id": "S1",
        "quantity": 2,
        "minimum_stock": 5,
        "price": 129.0,
        "attributes": '{"color": "yellow"}',
        "created_at": datetime(2025, 1, 1, 0, 0, 0),
        "updated_at": datetime(2025, 1, 1, 0, 0, 0),
    }


@pytest.fixture
def sample_product(sample_product_row) -> Product:
    """Sample stored product"""
    row = dict(sample_product_row)
    row.pop("attributes")
    return Product(**row, color="yellow")
