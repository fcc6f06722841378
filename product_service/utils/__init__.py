"""
Utility modules for product service
"""

from .config import get_app_config, get_db_config
from .database import ProductDatabase
from .memory_store import InMemoryProductStore
from .store import ProductStore

__all__ = [
    "get_app_config",
    "get_db_config",
    "ProductDatabase",
    "InMemoryProductStore",
    "ProductStore"
]
